"""wholesale-guard: keep wholesale accounts from redeeming checkout coupons."""

__version__ = "1.0.0"

PLUGIN_NAME = "WooCommerce Wholesale Role Restriction"
