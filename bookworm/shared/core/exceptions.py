# 📄 File: bookworm/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the library uses to say exactly which rule
# was broken - a bad email, a weak password, a book that cannot be deleted, and so on.
# 🧪 Purpose (Technical Summary):
# Domain exception hierarchy with stable error codes, structured details and dictionary
# serialization so an outer layer can map failures to transport responses.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# Value objects, domain models, catalog and user domain services, security module

from typing import Any, Dict, Iterable, Optional, Tuple


class LibraryException(Exception):
    """
    Base exception class for the library domain.
    All custom exceptions should inherit from this class.
    """

    default_message = "Library domain error"
    default_code = "LIBRARY_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.error_code = error_code or self.default_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }

    def __str__(self) -> str:
        return self.message


# =============================================================================
# EMAIL EXCEPTIONS
# =============================================================================

class EmailException(LibraryException):
    """Raised when an email address breaks a formatting rule."""

    default_message = "Invalid email"
    default_code = "EMAIL_ERROR"


class EmptyEmailError(EmailException):
    """Email is missing or blank."""

    default_message = "Email must not be empty"
    default_code = "EMAIL_EMPTY"


class InvalidEmailFormatError(EmailException):
    """
    Email does not match the address pattern or its domain is too long.
    The broken rule is reported in ``details["rule"]``.
    """

    default_message = "Invalid email format"
    default_code = "EMAIL_INVALID_FORMAT"

    def __init__(
        self,
        message: Optional[str] = None,
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule

        super().__init__(message=message, details=details)
        self.rule = rule


# =============================================================================
# PASSWORD EXCEPTIONS
# =============================================================================

class PasswordException(LibraryException):
    """Raised for password policy, hashing and verification failures."""

    default_message = "Password error"
    default_code = "PASSWORD_ERROR"


class EmptyPasswordError(PasswordException):
    """Raw password is missing or blank. Short-circuits the policy checks."""

    default_message = "Password is required"
    default_code = "PASSWORD_REQUIRED"


class InvalidPasswordFormatError(PasswordException):
    """
    Raw password breaks one or more policy rules.
    Every broken rule is collected into ``violations`` and joined into the message.
    """

    default_message = "Password does not meet the policy"
    default_code = "PASSWORD_INVALID_FORMAT"

    def __init__(self, violations: Iterable[str]):
        self.violations: Tuple[str, ...] = tuple(violations)
        super().__init__(
            message=", ".join(self.violations) or None,
            details={"violations": list(self.violations)}
        )


class PasswordEncryptionError(PasswordException):
    """Hashing a password failed or an already-hashed value is unusable."""

    default_message = "Password encryption failed"
    default_code = "PASSWORD_ENCRYPTION_FAILED"


class PasswordVerificationError(PasswordException):
    """Comparing a raw password with a stored hash failed."""

    default_message = "Password verification failed"
    default_code = "PASSWORD_VERIFICATION_FAILED"


# =============================================================================
# NAME EXCEPTIONS
# =============================================================================

class NameException(LibraryException):
    """Raised when a person's name breaks a formatting rule."""

    default_message = "Invalid name"
    default_code = "NAME_ERROR"


class EmptyNameError(NameException):
    default_message = "Name must not be empty"
    default_code = "NAME_EMPTY"


class InvalidNameLengthError(NameException):
    default_message = "Name length is out of range"
    default_code = "NAME_INVALID_LENGTH"

    def __init__(
        self,
        message: Optional[str] = None,
        part: Optional[str] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None
    ):
        details: Dict[str, Any] = {}
        if part:
            details["part"] = part
        if min_length is not None:
            details["min_length"] = min_length
        if max_length is not None:
            details["max_length"] = max_length

        super().__init__(message=message, details=details)


# =============================================================================
# LOAN EXCEPTIONS
# =============================================================================

class LoanException(LibraryException):
    """Raised when loan sizing or timing rules are violated."""

    default_message = "Loan rule violation"
    default_code = "LOAN_ERROR"


class InvalidLoanPeriodError(LoanException):
    default_message = "Invalid loan period"
    default_code = "LOAN_PERIOD_INVALID"


class InvalidLoanExtensionError(LoanException):
    default_message = "Invalid loan extension"
    default_code = "LOAN_EXTENSION_INVALID"


class InvalidLoanQuantityError(LoanException):
    default_message = "Invalid loan quantity"
    default_code = "LOAN_QUANTITY_INVALID"


# =============================================================================
# BOOK EXCEPTIONS
# =============================================================================

class BookException(LibraryException):
    """Raised when a catalog rule is violated."""

    default_message = "Book rule violation"
    default_code = "BOOK_ERROR"


class BookValidationError(BookException):
    """
    Raised by book value objects (title, language, type, quantity).
    """

    default_message = "Invalid book data"
    default_code = "BOOK_VALIDATION_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None
    ):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(message=message, details=details)


class BookBusinessError(BookException):
    default_message = "Book business rule violation"
    default_code = "BOOK_BUSINESS_ERROR"


class BookNotFoundError(BookException):
    default_message = "Book not found"
    default_code = "BOOK_NOT_FOUND"

    def __init__(self, book_id: Any, message: Optional[str] = None):
        self.book_id = book_id
        super().__init__(
            message=message or f"Book not found: {book_id}",
            details={"book_id": book_id}
        )


class DuplicateBookError(BookException):
    """Another book already owns the (title, language, type) triple."""

    default_message = "An identical book already exists"
    default_code = "BOOK_DUPLICATE"

    def __init__(
        self,
        title: str,
        language: str,
        book_type: str,
        existing_book_id: Optional[Any] = None
    ):
        details: Dict[str, Any] = {
            "title": title,
            "language": language,
            "type": book_type,
        }
        if existing_book_id is not None:
            details["existing_book_id"] = existing_book_id

        super().__init__(
            message=(
                f"An identical book already exists "
                f"(title: {title}, language: {language}, type: {book_type})"
            ),
            details=details
        )


class BookDeletionNotAllowedError(BookException):
    default_message = "Book cannot be deleted in its current status"
    default_code = "BOOK_DELETION_NOT_ALLOWED"

    def __init__(self, book_id: Any, status: str):
        super().__init__(
            message=f"Book cannot be deleted in its current status: {status}",
            details={"book_id": book_id, "status": status}
        )


class BookNotAvailableError(BookException):
    """The book's status does not allow lending, whatever its stock."""

    default_message = "Book is not available"
    default_code = "BOOK_NOT_AVAILABLE"


class InsufficientStockError(BookException):
    default_message = "Not enough stock"
    default_code = "BOOK_INSUFFICIENT_STOCK"

    def __init__(self, requested: int, available: int, status: Optional[str] = None):
        details: Dict[str, Any] = {"requested": requested, "available": available}
        if status:
            details["status"] = status

        super().__init__(
            message=f"Cannot borrow {requested} copies: {available} available",
            details=details
        )


# =============================================================================
# USER EXCEPTIONS
# =============================================================================

class UserException(LibraryException):
    """Raised when a user account rule is violated."""

    default_message = "User rule violation"
    default_code = "USER_ERROR"


class UserNotFoundError(UserException):
    default_message = "User not found"
    default_code = "USER_NOT_FOUND"

    def __init__(self, identifier: Any, message: Optional[str] = None):
        self.identifier = identifier
        super().__init__(
            message=message or f"User not found: {identifier}",
            details={"identifier": str(identifier)}
        )


class DuplicateEmailError(UserException):
    default_message = "A user with this email already exists"
    default_code = "USER_DUPLICATE_EMAIL"


class InvalidCredentialsError(UserException):
    """The supplied current password does not match the stored credential."""

    default_message = "Current password is incorrect"
    default_code = "USER_INVALID_PASSWORD"


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, LibraryException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
        }
    }


def is_domain_error(exception: Exception) -> bool:
    """Check if the exception is a rule violation raised by this package."""
    return isinstance(exception, LibraryException)
