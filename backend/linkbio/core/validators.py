"""
Validation utilities for authentication and profile data.
"""
import re
from typing import Tuple

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


def validate_username(username: str) -> Tuple[bool, str]:
    """
    Validate a login name.

    Args:
        username: Username to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not username or not username.strip():
        return False, "Username is required"

    if len(username.strip()) < USERNAME_MIN_LENGTH:
        return False, f"Username must be at least {USERNAME_MIN_LENGTH} characters long"

    if re.search(r"\s", username.strip()):
        return False, "Username must not contain whitespace"

    return True, ""


def validate_password(password: str) -> Tuple[bool, str]:
    """
    Validate password strength.

    Args:
        password: Password to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not password:
        return False, "Password is required"

    if len(password) < PASSWORD_MIN_LENGTH:
        return False, f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"

    return True, ""
