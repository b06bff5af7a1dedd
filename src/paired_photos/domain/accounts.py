"""Domain models for registered accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Represents an account stored in the catalog."""

    display_name: str
    external_id: int
    secret_hash: str
    phone_number: str
