"""
Query functions for portfolio content.

Every list is ordered by ``sort_order`` in the database. Graph loaders eager
load their children so callers receive fully materialized rows and never
trigger lazy loads while normalizing.
"""
from typing import List, Optional

from sqlalchemy.orm import selectinload

from portfolio_api.models import Item, Section, Site


# ------------------------
# Sites
# ------------------------

def get_site_by_slug(slug: str) -> Optional[Site]:
    return Site.query.filter_by(slug=slug).first()


def get_portfolio_site(slug: str) -> Optional[Site]:
    """Site with ordered CTAs, ordered sections and their ordered items."""
    return (
        Site.query
        .options(
            selectinload(Site.ctas),
            selectinload(Site.sections).selectinload(Section.items),
        )
        .filter_by(slug=slug)
        .first()
    )


# ------------------------
# Sections
# ------------------------

def list_sections_for_site(site_id: str) -> List[Section]:
    return (
        Section.query
        .options(selectinload(Section.items))
        .filter_by(site_id=site_id)
        .order_by(Section.sort_order.asc())
        .all()
    )


def get_section(section_id: str, with_items: bool = False) -> Optional[Section]:
    query = Section.query
    if with_items:
        query = query.options(selectinload(Section.items))
    return query.filter_by(id=section_id).first()


def find_section_by_key(section_key: str, site_id: Optional[str] = None) -> Optional[Section]:
    query = Section.query.filter_by(section_key=section_key)
    if site_id is not None:
        query = query.filter_by(site_id=site_id)
    return query.order_by(Section.sort_order.asc()).first()


def section_key_exists(site_id: str, section_key: str) -> bool:
    return (
        Section.query
        .filter_by(site_id=site_id, section_key=section_key)
        .first()
    ) is not None


# ------------------------
# Items
# ------------------------

def list_items(section_id: Optional[str] = None) -> List[Item]:
    query = Item.query
    if section_id is not None:
        query = query.filter_by(section_id=section_id)
    return query.order_by(Item.sort_order.asc()).all()


def get_item(item_id: str) -> Optional[Item]:
    return Item.query.filter_by(id=item_id).first()
