# 📄 File: bookworm/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A collection of helpers other parts of the code share, like writing log lines and checking
# that emails, passwords and names look right.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package with structured logging and the field validators
# backing the value objects.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - validators: Field validation rules

# 🔄 Connected Modules / Calls From:
# Used by: value objects, domain services, tests

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Field validation rules for email, password and names
"""

from .logging import get_logger, log_context, setup_logging
from .validators import (
    ValidationResult,
    validate_email_address,
    validate_name_part,
    validate_password
)

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "ValidationResult",
    "validate_email_address",
    "validate_name_part",
    "validate_password",
]
