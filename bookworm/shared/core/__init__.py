"""
Core utilities package for Bookworm.
Provides the exception taxonomy, password hashing and the clock capability.
"""

from .clock import (
    Clock,
    SystemClock,
    FixedClock
)

from .exceptions import (
    LibraryException,
    EmailException,
    PasswordException,
    NameException,
    LoanException,
    BookException,
    UserException,
    exception_to_dict,
    is_domain_error
)

from .security import (
    PasswordEncoder,
    PasslibPasswordEncoder,
    get_password_encoder
)

__all__ = [
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",

    # Exceptions
    "LibraryException",
    "EmailException",
    "PasswordException",
    "NameException",
    "LoanException",
    "BookException",
    "UserException",
    "exception_to_dict",
    "is_domain_error",

    # Security
    "PasswordEncoder",
    "PasslibPasswordEncoder",
    "get_password_encoder",
]
