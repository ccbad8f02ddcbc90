"""
Password validation utilities.
"""

from typing import Tuple, List


class PasswordValidator:
    """Validates password length requirements."""

    def __init__(self, min_length: int = 1, max_length: int = 128):
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, password: str) -> Tuple[bool, List[str]]:
        """
        Validate password against the length requirements.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if len(password) < self.min_length:
            errors.append(f'Password must be at least {self.min_length} characters long')

        if len(password) > self.max_length:
            errors.append(f'Password must not exceed {self.max_length} characters')

        return (len(errors) == 0, errors)


# Global validator instance
password_validator = PasswordValidator(
    min_length=1,  # Only require at least 1 character
    max_length=128
)


def validate_password(password: str) -> Tuple[bool, List[str]]:
    """Convenience function for password validation."""
    return password_validator.validate(password)
