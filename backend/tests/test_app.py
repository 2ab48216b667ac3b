from sqlalchemy import inspect

from portfolio_api import create_app
from portfolio_api.extensions import db


def test_openapi_document_served(client):
    response = client.get("/openapi/portfolio.yaml")
    assert response.status_code == 200
    assert response.mimetype == "application/yaml"
    assert b"/api/portfolio" in response.data
    response.close()


def test_swagger_ui_mounted(client):
    response = client.get("/swagger/")
    assert response.status_code == 200


def test_cors_allows_configured_origin(client, viewer, seeded):
    response = client.get(
        "/api/portfolio",
        headers={**viewer, "Origin": "http://localhost:4200"},
    )
    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:4200"
    assert response.headers.get("Access-Control-Allow-Credentials") == "true"


def test_cors_ignores_unknown_origin(client, viewer, seeded):
    response = client.get(
        "/api/portfolio",
        headers={**viewer, "Origin": "https://evil.example.com"},
    )
    assert "Access-Control-Allow-Origin" not in response.headers


def test_startup_migration_builds_schema(tmp_path):
    app = create_app(
        "testing",
        config_override={
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path}/migrated.db",
            "AUTO_MIGRATE": True,
        },
    )

    with app.app_context():
        inspector = inspect(db.engine)
        assert {"sites", "ctas", "sections", "items"} <= set(inspector.get_table_names())

        slug_indexes = {index["name"]: index for index in inspector.get_indexes("sites")}
        assert slug_indexes["ix_sites_slug"]["unique"]
        assert slug_indexes["ix_sites_slug"]["column_names"] == ["slug"]

        section_uniques = {
            constraint["name"]: constraint["column_names"]
            for constraint in inspector.get_unique_constraints("sections")
        }
        assert section_uniques["uq_section_key_per_site"] == ["site_id", "section_key"]

        db.session.remove()
        db.engine.dispose()
