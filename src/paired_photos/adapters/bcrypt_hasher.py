"""Bcrypt implementation of the secret hasher."""

from dataclasses import dataclass

import bcrypt

from paired_photos.services.identity import SecretHasher

# bcrypt only reads the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


@dataclass
class BcryptSecretHasher(SecretHasher):
    """Salted adaptive hashing using bcrypt."""

    rounds: int = 10

    def hash(self, plain: str) -> str:
        """Hash a secret with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(plain), salt).decode("ascii")

    def verify(self, plain: str, hashed: str) -> bool:
        """Check a secret against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(_encode(plain), hashed.encode("ascii"))
        except ValueError:
            return False


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]
