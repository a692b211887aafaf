"""Email value object.

Provides validated email addresses for user profiles. Unlike a login
identifier the address is stored exactly as given (surrounding whitespace
aside), so uniqueness is an exact match.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from usermgmt.domain.profile.exceptions import InvalidEmailError

EMAIL_MAX_LENGTH = 255


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email is required."
            raise InvalidEmailError(msg)

        stripped = self.value.strip()

        if len(stripped) > EMAIL_MAX_LENGTH:
            msg = f"Email cannot be longer than {EMAIL_MAX_LENGTH} characters."
            raise InvalidEmailError(msg)

        # Syntax only; the normalized form is discarded
        try:
            validate_email(stripped, check_deliverability=False)
        except EmailNotValidError as e:
            msg = "Please enter a valid email address."
            raise InvalidEmailError(msg) from e

        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
