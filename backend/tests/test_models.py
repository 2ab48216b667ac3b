import pytest
from sqlalchemy.exc import IntegrityError

from portfolio_api.extensions import db
from portfolio_api.models import Cta, Item, Section, Site
from portfolio_api.repositories import get_portfolio_site, list_items


def test_deleting_site_cascades_to_children(app, client, admin, seeded):
    site = db.session.get(Site, seeded["site_id"])
    db.session.delete(site)
    db.session.commit()

    assert Section.query.count() == 0
    assert Item.query.count() == 0
    assert Cta.query.count() == 0

    assert client.get(f"/api/sections/{seeded['projects_id']}", headers=admin).status_code == 404
    assert client.get(f"/api/items/{seeded['item_ids']['first']}", headers=admin).status_code == 404


def test_site_slug_is_unique(app, seeded):
    db.session.add(Site(slug="surlesmobile", title="Duplicate"))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_section_key_unique_per_site_only(app, seeded):
    other = Site(slug="other", title="Other")
    db.session.add(other)
    db.session.flush()

    # Same key on another site is fine
    db.session.add(Section(site_id=other.id, section_key="projects", title="Projects"))
    db.session.commit()

    db.session.add(Section(site_id=other.id, section_key="projects", title="Again"))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_sort_order_defaults_to_zero(app, seeded):
    item = Item(section_id=seeded["talks_id"], title="Untitled")
    db.session.add(item)
    db.session.commit()
    assert item.sort_order == 0


def test_list_items_orders_by_sort_order(app, seeded):
    titles = [i.title for i in list_items(section_id=seeded["projects_id"])]
    assert titles == ["First", "Second", "Third"]


def test_portfolio_site_loads_ordered_graph(app, seeded):
    site = get_portfolio_site("surlesmobile")
    assert [s.section_key for s in site.sections] == ["projects", "talks"]
    assert [c.label for c in site.ctas] == ["GitHub", "Contact"]
    assert get_portfolio_site("missing") is None
