import pytest

from cms_api.core.password_policy import RULE_MESSAGES, check_password


@pytest.mark.parametrize("password", ["p-U:QaA/3G", "Str0ng!Pass", "A1 bcdefg", "Aa1!Aa1!"])
def test_strong_passwords(password):
    result = check_password(password)
    assert result.strong
    assert result.violations == ()
    assert result.message == ""


@pytest.mark.parametrize(
    ("password", "violations"),
    [
        ("weakpassword", ("uppercase", "digit", "symbol")),
        ("correct horse battery staple", ("uppercase", "digit")),
        ("UPPERCASE-ONLY", ("digit",)),
        ("Password1", ("symbol",)),
        ("password1!", ("uppercase",)),
        ("Aa1!", ("min_length",)),
        ("abc", ("min_length", "uppercase", "digit", "symbol")),
    ],
)
def test_violations_are_reported_in_fixed_order(password, violations):
    result = check_password(password)
    assert not result.strong
    assert result.violations == violations
    assert result.messages == [RULE_MESSAGES[rule] for rule in violations]


def test_message_joins_rule_messages():
    result = check_password("weakpassword")
    assert result.message == (
        "The password must contain at least one uppercase letter. "
        "The password must contain at least one number. "
        "The password must contain at least one special character."
    )


def test_maximum_length_is_not_a_policy_rule():
    assert check_password("Aa1!" * 64).strong
