# 📄 File: bookworm/shared/utils/validators.py

# 🧭 Purpose (Layman Explanation):
# This file contains the checkers that decide whether an email, password or name is acceptable,
# collecting every problem they find so the user can fix them all at once.

# 🧪 Purpose (Technical Summary):
# Rule functions returning ValidationResult objects for email, password policy and name parts.
# Value objects call these and translate failures into domain exceptions.

# 🔗 Dependencies:
# - re: Regular expression patterns for validation

# 🔄 Connected Modules / Calls From:
# Used by: Email, Password and FullName value objects

import re
from typing import List, Optional

# Email validation
EMAIL_PATTERN = re.compile(
    r'^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}$'
)
EMAIL_DOMAIN_MAX_LENGTH = 255

# Password validation patterns
PASSWORD_MIN_LENGTH = 8
SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
PASSWORD_PATTERNS = {
    'uppercase': re.compile(r'[A-Z]'),
    'digit': re.compile(r'[0-9]'),
    'special': re.compile(r'[!@#$%^&*(),.?":{}|<>]'),
}

# Error messages
EMAIL_EMPTY = "Email must not be empty"
EMAIL_INVALID = "Invalid email format"
EMAIL_DOMAIN_TOO_LONG = "Email domain is too long"

PASSWORD_REQUIRED = "Password is required"
PASSWORD_LENGTH = f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
PASSWORD_UPPERCASE = "Password must contain at least one uppercase letter"
PASSWORD_DIGIT = "Password must contain at least one digit"
PASSWORD_SPECIAL_CHAR = "Password must contain at least one special character"

NAME_EMPTY = "Name must not be empty"


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool = True, errors: Optional[List[str]] = None, rule: Optional[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.rule = rule

    def add_error(self, error: str, rule: Optional[str] = None):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False
        if rule and not self.rule:
            self.rule = rule

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


# ==============================================================================
# EMAIL VALIDATION
# ==============================================================================

def validate_email_address(email: Optional[str]) -> ValidationResult:
    """
    Validate email address format.

    Stops at the first failing rule: emptiness, pattern, domain length.

    Args:
        email: Email address to validate

    Returns:
        ValidationResult with validation status and the broken rule name
    """
    result = ValidationResult(True)

    if email is None or not isinstance(email, str) or not email.strip():
        result.add_error(EMAIL_EMPTY, rule='empty')
        return result

    email = email.strip()

    if not EMAIL_PATTERN.match(email):
        result.add_error(EMAIL_INVALID, rule='pattern')
        return result

    domain = email.split('@', 1)[1]
    if len(domain) > EMAIL_DOMAIN_MAX_LENGTH:
        result.add_error(EMAIL_DOMAIN_TOO_LONG, rule='domain_length')

    return result


# ==============================================================================
# PASSWORD VALIDATION
# ==============================================================================

def validate_password(password: Optional[str]) -> ValidationResult:
    """
    Validate password strength requirements.

    A missing or blank password fails immediately with the 'required' rule.
    Otherwise every policy rule is checked and all violations are collected.

    Args:
        password: Raw password to validate

    Returns:
        ValidationResult with one error per broken rule
    """
    result = ValidationResult(True)

    if password is None or not isinstance(password, str) or not password.strip():
        result.add_error(PASSWORD_REQUIRED, rule='required')
        return result

    if len(password) < PASSWORD_MIN_LENGTH:
        result.add_error(PASSWORD_LENGTH, rule='policy')

    if not PASSWORD_PATTERNS['uppercase'].search(password):
        result.add_error(PASSWORD_UPPERCASE, rule='policy')

    if not PASSWORD_PATTERNS['digit'].search(password):
        result.add_error(PASSWORD_DIGIT, rule='policy')

    if not PASSWORD_PATTERNS['special'].search(password):
        result.add_error(PASSWORD_SPECIAL_CHAR, rule='policy')

    return result


# ==============================================================================
# NAME VALIDATION
# ==============================================================================

def validate_name_part(value: Optional[str], min_length: int, max_length: int, message: str) -> ValidationResult:
    """
    Validate one part of a person's name.

    Args:
        value: Raw name part
        min_length: Minimum length after trimming
        max_length: Maximum length after trimming
        message: Length error message, formatted with the bounds

    Returns:
        ValidationResult, failing on the first broken rule
    """
    result = ValidationResult(True)

    if value is None or not isinstance(value, str) or not value.strip():
        result.add_error(NAME_EMPTY, rule='empty')
        return result

    length = len(value.strip())
    if length < min_length or length > max_length:
        result.add_error(message.format(min=min_length, max=max_length), rule='length')

    return result
