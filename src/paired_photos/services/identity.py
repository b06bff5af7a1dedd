"""Account registration and credential verification."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from paired_photos.domain.accounts import Account
from paired_photos.domain.errors import DuplicateIdError, InvalidCredentialsError

logger = logging.getLogger(__name__)

_DUMMY_SECRET = "paired-photos-timing-guard"


class AccountRepository(Protocol):
    """Persistence interface for accounts."""

    def find_account(self, external_id: int) -> Account | None:
        """Return the account for an external id, if present."""

    def insert_account(self, account: Account) -> str:
        """Persist a new account and return its id."""


class SecretHasher(Protocol):
    """One-way salted hashing of secrets."""

    def hash(self, plain: str) -> str:
        """Return a salted hash that embeds its cost parameter."""

    def verify(self, plain: str, hashed: str) -> bool:
        """Return true when the plain secret matches the hash."""


@dataclass
class IdentityService:
    """Registers accounts and checks login attempts."""

    repository: AccountRepository
    hasher: SecretHasher
    _dummy_hash: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._dummy_hash = self.hasher.hash(_DUMMY_SECRET)

    async def register(
        self,
        display_name: str,
        external_id: int,
        secret: str,
        phone_number: str,
    ) -> Account:
        """Create an account unless the external id is already taken."""
        if self.repository.find_account(external_id) is not None:
            logger.info("Rejected duplicate registration for eid %s", external_id)
            raise DuplicateIdError(external_id)

        secret_hash = await asyncio.to_thread(self.hasher.hash, secret)
        account = Account(
            display_name=display_name,
            external_id=external_id,
            secret_hash=secret_hash,
            phone_number=phone_number,
        )
        self.repository.insert_account(account)
        logger.info("Registered account for eid %s", external_id)
        return account

    async def login(self, external_id: int, secret: str) -> None:
        """Raise ``InvalidCredentialsError`` unless the secret matches."""
        account = self.repository.find_account(external_id)
        if account is None:
            # Pay the same verify cost as a real mismatch.
            await asyncio.to_thread(self._verify_against_dummy, secret)
            raise InvalidCredentialsError

        matches = await asyncio.to_thread(
            self.hasher.verify, secret, account.secret_hash
        )
        if not matches:
            raise InvalidCredentialsError

    def _verify_against_dummy(self, secret: str) -> None:
        self.hasher.verify(secret, self._dummy_hash)
