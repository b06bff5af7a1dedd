"""Supabase-backed account repository."""

from dataclasses import dataclass

import httpx
from supabase import Client, PostgrestAPIError

from paired_photos.domain.accounts import Account
from paired_photos.domain.errors import DuplicateIdError, StoreError
from paired_photos.services.identity import AccountRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseAccountRepository(AccountRepository):
    """Supabase implementation for account persistence.

    A unique index on ``eid`` turns a concurrent double registration into
    a ``DuplicateIdError`` instead of a second row.
    """

    client: Client
    table_name: str = "accounts"

    def find_account(self, external_id: int) -> Account | None:
        """Return the account for an external id, if present."""
        try:
            response = (
                self.client.table(self.table_name)
                .select("name, eid, password_hash, mobile_number")
                .eq("eid", external_id)
                .limit(1)
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise StoreError("Failed to look up account") from exc
        if response.data:
            row = response.data[0]
            return Account(
                display_name=row["name"],
                external_id=row["eid"],
                secret_hash=row["password_hash"],
                phone_number=row["mobile_number"],
            )
        return None

    def insert_account(self, account: Account) -> str:
        """Create an account row and return its id."""
        try:
            response = (
                self.client.table(self.table_name)
                .insert(
                    {
                        "name": account.display_name,
                        "eid": account.external_id,
                        "password_hash": account.secret_hash,
                        "mobile_number": account.phone_number,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateIdError(account.external_id) from exc
            raise StoreError("Failed to insert account") from exc
        except httpx.HTTPError as exc:
            raise StoreError("Failed to insert account") from exc
        if not response.data:
            raise StoreError("Failed to insert account")
        return str(response.data[0]["id"])
