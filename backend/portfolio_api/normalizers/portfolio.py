# Read-only view served to the public site. Ids and sort keys are not part of it.
from typing import Any, Dict

DEFAULT_HERO_HEADLINE = "Software Architect & Builder"


def _by_sort_order(rows):
    # Stable: ties keep the order the database returned
    return sorted(rows, key=lambda r: r.sort_order)


def normalize_link_item(item) -> Dict[str, Any]:
    return {
        "title": item.title,
        "description": item.description,
        "href": item.href,
        "meta": item.meta,
    }


def normalize_hero_cta(cta) -> Dict[str, Any]:
    return {
        "label": cta.label,
        "href": cta.href,
        "icon": cta.icon,
    }


def normalize_portfolio(site) -> Dict[str, Any]:
    """
    Assemble the nested portfolio view for a site.

    Expects ``site`` with ``ctas``, ``sections`` and ``sections[].items``
    already loaded (see ``repositories.get_portfolio_site``).
    """
    if not site:
        raise ValueError("Site cannot be None")

    return {
        "site": {
            "title": site.title,
            "tagline": site.tagline,
            "email": site.email,
            "location": site.location,
            "social": {
                "linkedin": site.linkedin,
                "github": site.github,
            },
        },
        "hero": {
            "headline": site.hero_headline if site.hero_headline is not None else DEFAULT_HERO_HEADLINE,
            "subhead": site.hero_subhead,
            "cta": [normalize_hero_cta(c) for c in _by_sort_order(site.ctas)],
        },
        "sections": [
            {
                "key": section.section_key,
                "title": section.title,
                "icon": section.icon,
                "items": [normalize_link_item(i) for i in _by_sort_order(section.items)],
            }
            for section in _by_sort_order(site.sections)
        ],
    }
