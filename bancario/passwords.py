"""
Password Strength Module

Strong-password policy inspired by OWASP ASVS: minimum length, character
classes, no whitespace and no well-known trivial passwords.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

SPECIAL_CHARACTERS = "!@#$%^&*()_-+=[]{}|;:'\",.<>/?`~"

COMMON_PASSWORDS = frozenset({"password", "123456", "qwerty", "111111", "senha"})


@dataclass(frozen=True)
class PasswordPolicy:
    """Password policy configuration"""
    min_length: int = 12
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digit: bool = True
    require_special: bool = True
    allow_whitespace: bool = False
    special_characters: str = SPECIAL_CHARACTERS
    common_passwords: FrozenSet[str] = field(default=COMMON_PASSWORDS)

    def validate(self, password: str) -> Tuple[bool, List[str]]:
        """
        Validate password against policy

        Every rule is evaluated, so the violations list names all of the
        rules the password breaks.
        """
        violations = []

        if len(password) < self.min_length:
            violations.append(f"Minimum length {self.min_length}")

        if self.require_uppercase and not any(c.isupper() for c in password):
            violations.append("Must contain uppercase letter")

        if self.require_lowercase and not any(c.islower() for c in password):
            violations.append("Must contain lowercase letter")

        if self.require_digit and not any(c.isdecimal() for c in password):
            violations.append("Must contain digit")

        if self.require_special and not any(c in self.special_characters for c in password):
            violations.append("Must contain special character")

        if not self.allow_whitespace and any(c.isspace() for c in password):
            violations.append("Must not contain whitespace")

        # Exact match only: 'Password@123' is not a common password
        if password.lower() in self.common_passwords:
            violations.append("Must not be a common password")

        return len(violations) == 0, violations

    def is_strong(self, password: str) -> bool:
        """Check if password satisfies every rule"""
        is_valid, _ = self.validate(password)
        return is_valid


DEFAULT_POLICY = PasswordPolicy()


def is_strong_password(password: str) -> bool:
    """Check a password against the default policy"""
    return DEFAULT_POLICY.is_strong(password)
