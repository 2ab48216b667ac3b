import logging

from portfolio_api.errors import NotFoundError
from portfolio_api.extensions import db
from portfolio_api.repositories import get_section
from portfolio_api.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_section(*, section_id: str) -> None:
    """Hard-delete a section; its items go with it (ORM and FK cascade)."""
    section = get_section(section_id)
    if not section:
        raise NotFoundError("Section not found")

    with transactional():
        db.session.delete(section)

    logger.info("Section %s deleted", section_id)
