from portfolio_api.auth.decorators import principal_from_claims


def test_roles_collected_from_all_role_claims():
    roles, _ = principal_from_claims({
        "roles": ["viewer"],
        "role": "editor",
        "cognito:groups": ["admin", 7],
    })
    assert roles == {"viewer", "editor", "admin"}


def test_scope_string_is_space_delimited():
    _, scopes = principal_from_claims({"scope": "openid  portfolio/read portfolio/write"})
    assert scopes == {"openid", "portfolio/read", "portfolio/write"}


def test_list_valued_scope_claims():
    _, scopes = principal_from_claims({"scp": ["portfolio/admin"]})
    assert scopes == {"portfolio/admin"}


def test_missing_claims_give_empty_principal():
    assert principal_from_claims({"sub": "abc"}) == (set(), set())
