"""Platform version ordering.

Follows the host platform's own comparison rules so the gate agrees with
how the platform orders its releases:

- Any character other than an ASCII letter or digit separates parts
  just like ``.``.
- A boundary between digits and letters also separates parts
  (``3.5.0RC1`` reads as ``3.5.0.RC.1``).
- Numeric parts compare numerically.
- Textual parts rank ``dev < alpha = a < beta = b < RC = rc < (number) < pl = p``;
  anything unrecognised ranks below ``dev``.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[^0-9A-Za-z.]")
_BOUNDARY = re.compile(r"(?<=\d)(?=[^\d.])|(?<=[^\d.])(?=\d)", re.ASCII)

# Prefix match, checked in order.
_SPECIAL_FORMS: tuple[tuple[str, int], ...] = (
    ("dev", 0),
    ("alpha", 1),
    ("a", 1),
    ("beta", 2),
    ("b", 2),
    ("RC", 3),
    ("rc", 3),
    ("#", 4),
    ("pl", 5),
    ("p", 5),
)
_UNKNOWN_FORM = -6

# Stands in for "any number" when a numeric part faces a textual one.
_NUMBER = "#N#"


def canonicalize(version: str) -> list[str]:
    """Split *version* into comparable parts.

    Examples:
        >>> canonicalize("3.5.0")
        ['3', '5', '0']
        >>> canonicalize("4.0.0-beta2")
        ['4', '0', '0', 'beta', '2']
    """
    text = _SEPARATORS.sub(".", version.strip())
    text = _BOUNDARY.sub(".", text)
    return [part for part in text.split(".") if part]


def _special_rank(part: str) -> int:
    for prefix, rank in _SPECIAL_FORMS:
        if part.startswith(prefix):
            return rank
    return _UNKNOWN_FORM


def _is_number(part: str) -> bool:
    return part.isascii() and part.isdigit()


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_parts(left: str, right: str) -> int:
    if _is_number(left) and _is_number(right):
        return _sign(int(left) - int(right))
    if _is_number(left):
        return _sign(_special_rank(_NUMBER) - _special_rank(right))
    if _is_number(right):
        return _sign(_special_rank(left) - _special_rank(_NUMBER))
    return _sign(_special_rank(left) - _special_rank(right))


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as *left* is lower than, equal to, or higher than *right*."""
    left_parts = canonicalize(left)
    right_parts = canonicalize(right)
    if not left_parts or not right_parts:
        return _sign(len(left_parts) - len(right_parts))

    for left_part, right_part in zip(left_parts, right_parts, strict=False):
        result = _compare_parts(left_part, right_part)
        if result:
            return result

    common = min(len(left_parts), len(right_parts))
    if len(left_parts) > common:
        return _compare_parts(left_parts[common], _NUMBER) or 1
    if len(right_parts) > common:
        return _compare_parts(_NUMBER, right_parts[common]) or -1
    return 0


def is_at_least(version: str, minimum: str) -> bool:
    """Whether *version* is *minimum* or newer."""
    return compare_versions(version, minimum) >= 0
