"""
User Management Value Objects

Immutable, self-validating building blocks of a User:
- Email: normalized address checked against the address pattern
- Password: raw value checked against the full policy, or an already-hashed value
- FullName: last name and first name with length bounds
"""

from .email import Email
from .full_name import FirstName, FullName, LastName
from .password import Password

__all__ = [
    "Email",
    "FirstName",
    "FullName",
    "LastName",
    "Password",
]
