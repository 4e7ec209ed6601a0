"""Admin-facing notice text."""

from __future__ import annotations

import html

from wholesale_guard.domain.ports import Translator

TEXT_DOMAIN = "woocommerce-coupon-restrictions"

COMPATIBILITY_MESSAGE = (
    "{plugin} requires at least {platform} v{required} in order to function. "
    "Please upgrade {platform}."
)


def identity_translator(text: str, domain: str) -> str:
    """Default translator: return *text* unchanged."""
    return text


def render_compatibility_notice(
    plugin: str,
    platform: str,
    required: str,
    *,
    translate: Translator = identity_translator,
) -> str:
    """Build the admin warning shown when the platform is too old.

    The sentence is looked up through *translate* before the three values
    are substituted; the values themselves are HTML-escaped.
    """
    template = translate(COMPATIBILITY_MESSAGE, TEXT_DOMAIN)
    message = template.format(
        plugin=html.escape(plugin),
        platform=html.escape(platform),
        required=html.escape(required),
    )
    return f'<div class="error"><p>{message}</p></div>'
