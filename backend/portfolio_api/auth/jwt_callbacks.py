import logging

from flask import current_app
from jwt import InvalidTokenError, PyJWKClient, PyJWKClientError

from portfolio_api.errors import error_response

logger = logging.getLogger(__name__)

JWKS_CLIENT_KEY = "portfolio_jwks_client"


def jwks_url_for(app):
    if app.config.get("JWT_JWKS_URL"):
        return app.config["JWT_JWKS_URL"]
    issuer = app.config.get("JWT_ISSUER")
    if not issuer:
        return None
    return issuer.rstrip("/") + "/.well-known/jwks.json"


def configure_jwt(app, jwt):
    """
    Wire token validation for the app.

    With an issuer configured, tokens are RS256-signed by the identity
    provider and verified against its JWKS. Without one, the shared
    ``JWT_SECRET_KEY`` is used (development and tests).
    """
    if app.config.get("REQUIRE_JWT_ISSUER") and not (
        app.config.get("JWT_ISSUER") and app.config.get("JWT_AUDIENCE")
    ):
        raise RuntimeError("JWT_ISSUER and JWT_AUDIENCE environment variables must be set")

    app.config["JWT_DECODE_ISSUER"] = app.config.get("JWT_ISSUER")
    app.config["JWT_DECODE_AUDIENCE"] = app.config.get("JWT_AUDIENCE")

    url = jwks_url_for(app)
    if url:
        app.config["JWT_DECODE_ALGORITHMS"] = ["RS256"]
        app.extensions[JWKS_CLIENT_KEY] = PyJWKClient(url)
        logger.info("Validating JWTs against %s", url)

    @jwt.decode_key_loader
    def load_decode_key(jwt_header, jwt_data):
        client = current_app.extensions.get(JWKS_CLIENT_KEY)
        if client is None:
            return current_app.config["JWT_SECRET_KEY"]
        try:
            return client.get_signing_key(jwt_header.get("kid")).key
        except PyJWKClientError as exc:
            logger.warning("Unable to resolve signing key: %s", exc)
            raise InvalidTokenError("Unknown signing key") from exc

    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        logger.info("Rejected request without usable token: %s", reason)
        return error_response(401, "Authentication required")

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        logger.info("Rejected invalid token: %s", reason)
        return error_response(401, "Invalid token")

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return error_response(401, "Token has expired")
