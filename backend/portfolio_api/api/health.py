import logging

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portfolio_api.extensions import db

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)

SERVICE_NAME = "portfolio-api"


def check_database():
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        db.session.rollback()
        return False


def _report(checks):
    healthy = all(checks.values())
    body = {
        "status": "ok" if healthy else "unhealthy",
        "service": SERVICE_NAME,
        "checks": {name: "ok" if passed else "failed" for name, passed in checks.items()},
    }
    return jsonify(body), 200 if healthy else 503


@health_bp.route("/health", methods=["GET"])
def health_check():
    return _report({"database": check_database()})


@health_bp.route("/health/ready", methods=["GET"])
def readiness_check():
    return _report({"database": check_database()})


@health_bp.route("/health/live", methods=["GET"])
def liveness_check():
    # Process is up; dependencies are not consulted
    return _report({})
