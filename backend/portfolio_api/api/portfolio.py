from flask import current_app, jsonify, request
from flask_jwt_extended import jwt_required

from portfolio_api.application.portfolio import update_site as update_site_use_case
from portfolio_api.auth import Policy, policy_required
from portfolio_api.normalizers import normalize_portfolio, normalize_site
from portfolio_api.repositories import get_portfolio_site, get_site_by_slug
from ._request import json_body
from . import api_bp


# ------------------------
# Portfolio
# ------------------------

@api_bp.route("/portfolio", methods=["GET"])
@jwt_required()
@policy_required(Policy.READ)
def get_portfolio():
    slug = (request.args.get("site") or "").strip() or current_app.config["DEFAULT_SITE_SLUG"]

    site = get_portfolio_site(slug)
    if not site:
        return jsonify({"error": "Site not found"}), 404

    return jsonify(normalize_portfolio(site)), 200


# ------------------------
# Sites
# ------------------------

@api_bp.route("/portfolio/sites/<slug>", methods=["GET"])
@jwt_required()
@policy_required(Policy.READ)
def get_site(slug):
    site = get_site_by_slug(slug)
    if not site:
        return jsonify({"error": "Site not found"}), 404

    return jsonify(normalize_site(site)), 200


@api_bp.route("/portfolio/sites/<slug>", methods=["PUT"])
@jwt_required()
@policy_required(Policy.WRITE)
def update_site(slug):
    site = update_site_use_case(slug=slug, data=json_body())
    return jsonify(normalize_site(site)), 200
