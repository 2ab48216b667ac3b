import logging

from portfolio_api.errors import NotFoundError
from portfolio_api.extensions import db
from portfolio_api.repositories import get_item
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_item(*, item_id: str) -> None:
    item = get_item(item_id)
    if not item:
        raise NotFoundError("Item not found")

    with transactional():
        db.session.delete(item)

    logger.info("Item %s deleted", item_id)
