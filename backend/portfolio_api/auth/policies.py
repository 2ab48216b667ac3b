from enum import Enum
from typing import AbstractSet


class Policy(str, Enum):
    READ = "Read"
    WRITE = "Write"
    ADMIN = "Admin"


# policy -> (qualifying roles, qualifying scope)
POLICY_RULES = {
    Policy.READ: (frozenset({"viewer", "editor", "admin"}), "portfolio/read"),
    Policy.WRITE: (frozenset({"editor", "admin"}), "portfolio/write"),
    Policy.ADMIN: (frozenset({"admin"}), "portfolio/admin"),
}


def is_authorized(roles: AbstractSet[str], scopes: AbstractSet[str], policy: Policy) -> bool:
    """
    Decide whether a principal satisfies a named policy.

    A principal qualifies through any listed role OR the policy's scope.
    Policies are evaluated independently: holding ``portfolio/write`` alone
    does not satisfy Read.
    """
    qualifying_roles, qualifying_scope = POLICY_RULES[Policy(policy)]
    return bool(qualifying_roles & set(roles)) or qualifying_scope in scopes
