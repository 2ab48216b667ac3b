from flask import jsonify
from flask_jwt_extended import jwt_required

from portfolio_api.application.portfolio import (
    create_item as create_item_use_case,
    delete_item as delete_item_use_case,
    update_item as update_item_use_case,
)
from portfolio_api.auth import Policy, policy_required
from portfolio_api.normalizers import normalize_item
from portfolio_api.repositories import get_item as find_item
from portfolio_api.repositories import list_items as query_items
from ._request import json_body, uuid_arg
from . import api_bp


@api_bp.route("/items", methods=["GET"])
@jwt_required()
@policy_required(Policy.READ)
def list_items():
    # No section filter lists every item; an unknown section yields []
    items = query_items(section_id=uuid_arg("sectionId"))
    return jsonify([normalize_item(i) for i in items]), 200


@api_bp.route("/items/<uuid:item_id>", methods=["GET"])
@jwt_required()
@policy_required(Policy.READ)
def get_item(item_id):
    item = find_item(str(item_id))
    if not item:
        return jsonify({"error": "Item not found"}), 404

    return jsonify(normalize_item(item)), 200


@api_bp.route("/items", methods=["POST"])
@jwt_required()
@policy_required(Policy.WRITE)
def create_item():
    item = create_item_use_case(data=json_body())

    response = jsonify(normalize_item(item))
    response.status_code = 201
    response.headers["Location"] = f"/api/items/{item.id}"
    return response


@api_bp.route("/items/<uuid:item_id>", methods=["PUT"])
@jwt_required()
@policy_required(Policy.WRITE)
def update_item(item_id):
    item = update_item_use_case(item_id=str(item_id), data=json_body())
    return jsonify(normalize_item(item)), 200


@api_bp.route("/items/<uuid:item_id>", methods=["DELETE"])
@jwt_required()
@policy_required(Policy.ADMIN)
def delete_item(item_id):
    delete_item_use_case(item_id=str(item_id))
    return "", 204
