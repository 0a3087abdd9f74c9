# 📄 File: bookworm/modules/user_management/domain/value_objects/email.py
# 🧭 Purpose (Layman Explanation):
# A checked email address - once one of these exists, you know the address is well formed.
# 🧪 Purpose (Technical Summary):
# Immutable Email value object validated at construction (emptiness, pattern, domain length)
# and normalized to a stripped, lower-case string.
# 🔗 Dependencies:
# dataclasses, shared validators, shared exceptions
# 🔄 Connected Modules / Calls From:
# User model, UserDomainService

from dataclasses import dataclass

from bookworm.shared.core.exceptions import EmptyEmailError, InvalidEmailFormatError
from bookworm.shared.utils.validators import validate_email_address


@dataclass(frozen=True)
class Email:
    """
    Email value object.

    Validation stops at the first failing rule in this order:
    emptiness, address pattern, domain length (255 characters).
    """

    value: str

    def __post_init__(self) -> None:
        result = validate_email_address(self.value)
        if not result.is_valid:
            if result.rule == 'empty':
                raise EmptyEmailError(result.first_error)
            raise InvalidEmailFormatError(result.first_error, rule=result.rule)

        object.__setattr__(self, "value", self.value.strip().lower())

    @classmethod
    def of(cls, value: str) -> "Email":
        """Create a validated email."""
        return cls(value)

    @staticmethod
    def is_valid(value: str) -> bool:
        """Run the full validation and report the outcome instead of raising."""
        return validate_email_address(value).is_valid

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def masked(self) -> str:
        """
        Masked form for display and logs.
        john.doe@example.com -> j***e@example.com
        """
        local = self.local_part
        if len(local) <= 2:
            return f"{local[0]}***@{self.domain}"
        return f"{local[0]}***{local[-1]}@{self.domain}"

    def __str__(self) -> str:
        return self.value
