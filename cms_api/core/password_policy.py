import re
from dataclasses import dataclass

MIN_LENGTH = 8

_RULES: tuple[tuple[str, str], ...] = (
    ("min_length", f"The password must be at least {MIN_LENGTH} characters long."),
    ("uppercase", "The password must contain at least one uppercase letter."),
    ("digit", "The password must contain at least one number."),
    ("symbol", "The password must contain at least one special character."),
)
RULE_MESSAGES = dict(_RULES)

_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class PasswordPolicyResult:
    violations: tuple[str, ...] = ()

    @property
    def strong(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        return [RULE_MESSAGES[rule] for rule in self.violations]

    @property
    def message(self) -> str:
        return " ".join(self.messages)


def check_password(password: str) -> PasswordPolicyResult:
    """Run the strength rules against ``password``.

    Violations are reported in rule order (length, uppercase, digit, symbol)
    so the joined message is stable.
    """
    failed = {
        "min_length": len(password) < MIN_LENGTH,
        "uppercase": _UPPERCASE_RE.search(password) is None,
        "digit": _DIGIT_RE.search(password) is None,
        "symbol": _SYMBOL_RE.search(password) is None,
    }
    return PasswordPolicyResult(violations=tuple(rule for rule, _ in _RULES if failed[rule]))
