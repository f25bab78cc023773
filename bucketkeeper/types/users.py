"""User-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """An identity on the platform."""

    login: str | None
    name: str | None
    email: str | None
