"""Domain enumerations for the early access form."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class FormField(_ValuesMixin, str, Enum):
    """Text fields of the early access form (agree-to-terms is a separate flag)."""

    FULL_NAME = "full_name"
    EMAIL = "email"
    INSTITUTION = "institution"
    ROLE = "role"
    REFERRAL_CODE = "referral_code"


class EffectKind(_ValuesMixin, str, Enum):
    """One-shot UI effects emitted by the launching controller."""

    SHOW_SUCCESS = "show_success"
    SHOW_ERROR = "show_error"
    OPEN_LINK = "open_link"
