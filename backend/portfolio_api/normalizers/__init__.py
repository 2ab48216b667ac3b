from .site import normalize_site
from .section import normalize_section
from .item import normalize_item
from .portfolio import normalize_portfolio, DEFAULT_HERO_HEADLINE

__all__ = [
    "normalize_site",
    "normalize_section",
    "normalize_item",
    "normalize_portfolio",
    "DEFAULT_HERO_HEADLINE",
]
