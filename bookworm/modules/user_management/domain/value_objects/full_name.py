# 📄 File: bookworm/modules/user_management/domain/value_objects/full_name.py
# 🧭 Purpose (Layman Explanation):
# A person's last name and first name, each checked for being present and a sensible length.
# 🧪 Purpose (Technical Summary):
# Immutable name-part value objects with per-part length bounds and a FullName composite.
# 🔗 Dependencies:
# dataclasses, shared validators, shared exceptions
# 🔄 Connected Modules / Calls From:
# User model, UserDomainService

from dataclasses import dataclass
from typing import ClassVar

from bookworm.shared.core.exceptions import EmptyNameError, InvalidNameLengthError
from bookworm.shared.utils.validators import validate_name_part


@dataclass(frozen=True)
class NamePart:
    """Common validation for one part of a name. Subclasses set the bounds."""

    value: str

    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 30
    LENGTH_MESSAGE: ClassVar[str] = "Name must be between {min} and {max} characters"
    PART: ClassVar[str] = "name"

    def __post_init__(self) -> None:
        result = validate_name_part(self.value, self.MIN_LENGTH, self.MAX_LENGTH, self.LENGTH_MESSAGE)
        if not result.is_valid:
            if result.rule == 'empty':
                raise EmptyNameError(result.first_error)
            raise InvalidNameLengthError(
                result.first_error,
                part=self.PART,
                min_length=self.MIN_LENGTH,
                max_length=self.MAX_LENGTH
            )
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def of(cls, value: str):
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LastName(NamePart):
    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 20
    LENGTH_MESSAGE: ClassVar[str] = "Last name must be between {min} and {max} characters"
    PART: ClassVar[str] = "last_name"


@dataclass(frozen=True)
class FirstName(NamePart):
    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 30
    LENGTH_MESSAGE: ClassVar[str] = "First name must be between {min} and {max} characters"
    PART: ClassVar[str] = "first_name"


@dataclass(frozen=True)
class FullName:
    """
    Last name and first name, validated independently (last name first).

    Plain strings are wrapped in LastName/FirstName on construction.
    """

    last_name: LastName
    first_name: FirstName

    def __post_init__(self) -> None:
        if not isinstance(self.last_name, LastName):
            object.__setattr__(self, "last_name", LastName(self.last_name))
        if not isinstance(self.first_name, FirstName):
            object.__setattr__(self, "first_name", FirstName(self.first_name))

    @classmethod
    def of(cls, last_name: str, first_name: str) -> "FullName":
        return cls(last_name, first_name)

    @property
    def full_name(self) -> str:
        return f"{self.last_name.value}{self.first_name.value}"

    def __str__(self) -> str:
        return self.full_name
