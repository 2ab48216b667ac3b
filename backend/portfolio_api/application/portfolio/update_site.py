import logging
from typing import Any, Dict

from portfolio_api.errors import NotFoundError
from portfolio_api.models import Site
from portfolio_api.repositories import get_site_by_slug
from portfolio_api.utils.payload import merge_fields
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)

SITE_UPDATE_FIELDS = {
    "title": "title",
    "tagline": "tagline",
    "email": "email",
    "location": "location",
    "linkedin": "linkedin",
    "github": "github",
    "heroHeadline": "hero_headline",
    "heroSubhead": "hero_subhead",
}


def update_site(*, slug: str, data: Dict[str, Any]) -> Site:
    """
    Merge supplied fields into a site.

    Null, empty or absent fields keep the stored value, so an all-null payload
    is a no-op that still returns the site.
    """
    site = get_site_by_slug(slug)
    if not site:
        raise NotFoundError("Site not found")

    with transactional():
        changed_fields = merge_fields(site, data, SITE_UPDATE_FIELDS)

    if changed_fields:
        logger.info("Site %s updated: %s", slug, ", ".join(changed_fields))

    return site
