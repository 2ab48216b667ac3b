import pytest

from portfolio_api.auth.policies import Policy, is_authorized


@pytest.mark.parametrize(
    "roles, expected",
    [
        ({"viewer"}, {Policy.READ: True, Policy.WRITE: False, Policy.ADMIN: False}),
        ({"editor"}, {Policy.READ: True, Policy.WRITE: True, Policy.ADMIN: False}),
        ({"admin"}, {Policy.READ: True, Policy.WRITE: True, Policy.ADMIN: True}),
        ({"guest"}, {Policy.READ: False, Policy.WRITE: False, Policy.ADMIN: False}),
        (set(), {Policy.READ: False, Policy.WRITE: False, Policy.ADMIN: False}),
    ],
)
def test_role_based_access(roles, expected):
    for policy, allowed in expected.items():
        assert is_authorized(roles, set(), policy) is allowed


@pytest.mark.parametrize(
    "scope, expected",
    [
        ("portfolio/read", {Policy.READ: True, Policy.WRITE: False, Policy.ADMIN: False}),
        ("portfolio/write", {Policy.READ: False, Policy.WRITE: True, Policy.ADMIN: False}),
        ("portfolio/admin", {Policy.READ: False, Policy.WRITE: False, Policy.ADMIN: True}),
        ("openid", {Policy.READ: False, Policy.WRITE: False, Policy.ADMIN: False}),
    ],
)
def test_scope_based_access(scope, expected):
    for policy, allowed in expected.items():
        assert is_authorized(set(), {scope}, policy) is allowed


def test_role_or_scope_is_a_disjunction():
    # viewer role alone cannot write, but the write scope adds it
    assert not is_authorized({"viewer"}, set(), Policy.WRITE)
    assert is_authorized({"viewer"}, {"portfolio/write"}, Policy.WRITE)


def test_policy_accepts_plain_names():
    assert is_authorized({"admin"}, set(), "Admin")
    with pytest.raises(ValueError):
        is_authorized({"admin"}, set(), "Owner")
