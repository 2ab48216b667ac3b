"""Shared fixtures: in-memory app, seeded portfolio and token helpers."""
import pytest
from flask_jwt_extended import create_access_token

from portfolio_api import create_app
from portfolio_api.extensions import db
from portfolio_api.models import Cta, Item, Section, Site


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_token(app):
    def _make_token(roles=(), scope=None, subject="user-1", **claims):
        additional_claims = dict(claims)
        if roles:
            additional_claims["roles"] = list(roles)
        if scope is not None:
            additional_claims["scope"] = scope
        return create_access_token(identity=subject, additional_claims=additional_claims)

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    def _auth_headers(*roles, scope=None):
        return {"Authorization": f"Bearer {make_token(roles=roles, scope=scope)}"}

    return _auth_headers


@pytest.fixture
def viewer(auth_headers):
    return auth_headers("viewer")


@pytest.fixture
def editor(auth_headers):
    return auth_headers("editor")


@pytest.fixture
def admin(auth_headers):
    return auth_headers("admin")


@pytest.fixture
def seeded(app):
    """
    Default site with two CTAs, two sections and three items.

    Rows are inserted out of sort order so ordering is exercised.
    Returns plain ids so tests never touch expired ORM instances.
    """
    site = Site(
        slug="surlesmobile",
        title="Jane Doe",
        tagline="Building things",
        email="jane@example.com",
        location="Lyon",
        linkedin="https://linkedin.com/in/jane",
        github="https://github.com/jane",
        hero_headline=None,
        hero_subhead="I design systems.",
    )
    db.session.add(site)
    db.session.flush()

    db.session.add_all([
        Cta(site_id=site.id, label="Contact", href="mailto:jane@example.com", icon="mail", sort_order=2),
        Cta(site_id=site.id, label="GitHub", href="https://github.com/jane", icon=None, sort_order=1),
    ])

    talks = Section(site_id=site.id, section_key="talks", title="Talks", icon="mic", sort_order=2)
    projects = Section(site_id=site.id, section_key="projects", title="Projects", icon="code", sort_order=1)
    db.session.add_all([talks, projects])
    db.session.flush()

    third = Item(section_id=projects.id, title="Third", sort_order=3)
    first = Item(section_id=projects.id, title="First", description="d1", href="https://a", meta="2024", sort_order=1)
    second = Item(section_id=projects.id, title="Second", sort_order=2)
    talk = Item(section_id=talks.id, title="Keynote", sort_order=0)
    db.session.add_all([third, first, second, talk])
    db.session.commit()

    return {
        "site_id": site.id,
        "projects_id": projects.id,
        "talks_id": talks.id,
        "item_ids": {"first": first.id, "second": second.id, "third": third.id, "talk": talk.id},
    }
