import logging
from typing import Any, Dict

from portfolio_api.errors import NotFoundError
from portfolio_api.models import Item
from portfolio_api.repositories import get_item
from portfolio_api.utils.payload import merge_fields
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)

ITEM_UPDATE_FIELDS = {
    "title": "title",
    "description": "description",
    "href": "href",
    "meta": "meta",
    "sortOrder": "sort_order",
}


def update_item(*, item_id: str, data: Dict[str, Any]) -> Item:
    item = get_item(item_id)
    if not item:
        raise NotFoundError("Item not found")

    with transactional():
        changed_fields = merge_fields(
            item, data, ITEM_UPDATE_FIELDS, int_fields=("sortOrder",)
        )

    if changed_fields:
        logger.info("Item %s updated: %s", item_id, ", ".join(changed_fields))

    return item
