import logging
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError

from portfolio_api.errors import ConflictError, NotFoundError
from portfolio_api.extensions import db
from portfolio_api.models import Section
from portfolio_api.models.base import generate_id
from portfolio_api.repositories import get_site_by_slug, section_key_exists
from portfolio_api.utils.payload import optional_int, optional_str, required_str
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)


def create_section(*, data: Dict[str, Any], default_site_slug: str) -> Section:
    """
    Create a section under a site resolved by slug.

    Edge cases handled:
    - Missing key or title
    - Unknown site slug
    - Duplicate section key within the site
    """
    key = required_str(data, "key")
    title = required_str(data, "title")
    icon = optional_str(data, "icon")
    sort_order = optional_int(data, "sortOrder")
    site_slug = optional_str(data, "siteSlug") or default_site_slug

    site = get_site_by_slug(site_slug)
    if not site:
        raise NotFoundError("Site not found")

    if section_key_exists(site.id, key):
        raise ConflictError("A section with this key already exists")

    section = Section()
    section.id = generate_id()
    section.site_id = site.id
    section.section_key = key
    section.title = title
    section.icon = icon
    section.sort_order = sort_order if sort_order is not None else 0

    try:
        with transactional():
            db.session.add(section)
    except IntegrityError as exc:
        # Lost a race with a concurrent insert of the same key
        raise ConflictError("A section with this key already exists") from exc

    logger.info("Section %s (%s) created on site %s", section.id, key, site.slug)
    return section
