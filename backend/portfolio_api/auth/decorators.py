import logging
from functools import wraps
from typing import Any, Iterable, Mapping, Set, Tuple

from flask import g
from flask_jwt_extended import get_jwt

from portfolio_api.errors import Forbidden
from .policies import Policy, is_authorized

logger = logging.getLogger(__name__)

ROLE_CLAIMS = ("roles", "role", "cognito:groups")
SCOPE_CLAIMS = ("scope", "scp")


def _as_strings(value: Any) -> Iterable[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [v for v in value if isinstance(v, str)]
    return []


def principal_from_claims(claims: Mapping[str, Any]) -> Tuple[Set[str], Set[str]]:
    """Extract (roles, scopes) from decoded JWT claims."""
    roles = set()
    for claim in ROLE_CLAIMS:
        roles.update(_as_strings(claims.get(claim)))

    scopes = set()
    for claim in SCOPE_CLAIMS:
        value = claims.get(claim)
        if isinstance(value, str):
            scopes.update(part for part in value.split(" ") if part)
        else:
            scopes.update(_as_strings(value))

    return roles, scopes


def policy_required(policy):
    """
    Enforce a named policy on a route.

    Must sit below ``@jwt_required()`` so the token is already verified.
    """
    policy = Policy(policy)

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()
            roles, scopes = principal_from_claims(claims)

            if not is_authorized(roles, scopes, policy):
                logger.info(
                    "Policy %s denied for subject %s",
                    policy.value, claims.get("sub")
                )
                raise Forbidden()

            g.principal_roles = roles
            g.principal_scopes = scopes
            return fn(*args, **kwargs)
        return wrapper
    return decorator
