from flask import current_app, jsonify, request
from flask_jwt_extended import jwt_required

from portfolio_api.application.portfolio import (
    create_section as create_section_use_case,
    delete_section as delete_section_use_case,
    update_section as update_section_use_case,
)
from portfolio_api.auth import Policy, policy_required
from portfolio_api.normalizers import normalize_section
from portfolio_api.repositories import get_section as find_section
from portfolio_api.repositories import get_site_by_slug, list_sections_for_site
from ._request import json_body
from . import api_bp


@api_bp.route("/sections", methods=["GET"])
@jwt_required()
@policy_required(Policy.READ)
def list_sections():
    slug = (request.args.get("siteSlug") or "").strip() or current_app.config["DEFAULT_SITE_SLUG"]

    site = get_site_by_slug(slug)
    if not site:
        return jsonify({"error": "Site not found"}), 404

    sections = list_sections_for_site(site.id)
    return jsonify([
        normalize_section(s, include_items=True) for s in sections
    ]), 200


@api_bp.route("/sections/<uuid:section_id>", methods=["GET"])
@jwt_required()
@policy_required(Policy.READ)
def get_section(section_id):
    section = find_section(str(section_id), with_items=True)
    if not section:
        return jsonify({"error": "Section not found"}), 404

    return jsonify(normalize_section(section, include_items=True)), 200


@api_bp.route("/sections", methods=["POST"])
@jwt_required()
@policy_required(Policy.WRITE)
def create_section():
    section = create_section_use_case(
        data=json_body(),
        default_site_slug=current_app.config["DEFAULT_SITE_SLUG"],
    )

    response = jsonify(normalize_section(section, include_items=True))
    response.status_code = 201
    response.headers["Location"] = f"/api/sections/{section.id}"
    return response


@api_bp.route("/sections/<uuid:section_id>", methods=["PUT"])
@jwt_required()
@policy_required(Policy.WRITE)
def update_section(section_id):
    section = update_section_use_case(section_id=str(section_id), data=json_body())
    return jsonify(normalize_section(section, include_items=True)), 200


@api_bp.route("/sections/<uuid:section_id>", methods=["DELETE"])
@jwt_required()
@policy_required(Policy.ADMIN)
def delete_section(section_id):
    delete_section_use_case(section_id=str(section_id))
    return "", 204
