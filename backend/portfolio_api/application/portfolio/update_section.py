import logging
from typing import Any, Dict

from portfolio_api.errors import NotFoundError
from portfolio_api.models import Section
from portfolio_api.repositories import get_section
from portfolio_api.utils.payload import merge_fields
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)

SECTION_UPDATE_FIELDS = {
    "title": "title",
    "icon": "icon",
    "sortOrder": "sort_order",
}


def update_section(*, section_id: str, data: Dict[str, Any]) -> Section:
    section = get_section(section_id)
    if not section:
        raise NotFoundError("Section not found")

    with transactional():
        changed_fields = merge_fields(
            section, data, SECTION_UPDATE_FIELDS, int_fields=("sortOrder",)
        )

    if changed_fields:
        logger.info("Section %s updated: %s", section_id, ", ".join(changed_fields))

    return section
