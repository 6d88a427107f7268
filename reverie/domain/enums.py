"""Domain enumerations for the Reverie application."""

from enum import Enum


class InvalidNameReason(str, Enum):
    """Why a username or project name was rejected"""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"

    def __str__(self) -> str:
        return self.value
