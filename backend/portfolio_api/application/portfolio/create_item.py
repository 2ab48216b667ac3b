import logging
from typing import Any, Dict

from portfolio_api.errors import NotFoundError
from portfolio_api.extensions import db
from portfolio_api.models import Item
from portfolio_api.models.base import generate_id
from portfolio_api.repositories import find_section_by_key, get_site_by_slug
from portfolio_api.utils.payload import optional_int, optional_str, required_str
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)


def create_item(*, data: Dict[str, Any]) -> Item:
    """
    Create an item under a section resolved by its key.

    Section keys are only unique per site; pass ``siteSlug`` to pick the
    site, otherwise the first matching section (by sort order) is used.
    """
    section_key = required_str(data, "sectionKey")
    title = required_str(data, "title")
    description = optional_str(data, "description")
    href = optional_str(data, "href")
    meta = optional_str(data, "meta")
    sort_order = optional_int(data, "sortOrder")
    site_slug = optional_str(data, "siteSlug")

    site_id = None
    if site_slug:
        site = get_site_by_slug(site_slug)
        if not site:
            raise NotFoundError("Site not found")
        site_id = site.id

    section = find_section_by_key(section_key, site_id=site_id)
    if not section:
        raise NotFoundError("Section not found")

    item = Item()
    item.id = generate_id()
    item.section_id = section.id
    item.title = title
    item.description = description
    item.href = href
    item.meta = meta
    item.sort_order = sort_order if sort_order is not None else 0

    with transactional():
        db.session.add(item)

    logger.info("Item %s created in section %s", item.id, section_key)
    return item
