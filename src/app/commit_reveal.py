from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Callable, Final

KEY_BYTES: Final[int] = 32


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    # At least 256 bits, or the move can be brute-forced from the digest.
    if num_bytes < KEY_BYTES:
        raise ValueError(f"key must be at least {KEY_BYTES} bytes, got {num_bytes}")
    return secrets.token_bytes(num_bytes).hex()


def compute_commitment(*, key: str, move: str) -> str:
    # The hex text itself is the HMAC key, so any off-the-shelf HMAC-SHA256 tool reproduces the digest.
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, move: str) -> bool:
    computed = compute_commitment(key=key, move=move)
    return secrets.compare_digest(expected_commitment.strip().lower().encode("utf-8"), computed.encode("ascii"))


@dataclass(frozen=True)
class Commitment:
    key: str
    digest: str

    @classmethod
    def create(cls, move: str, key_factory: Callable[[], str] = generate_key) -> "Commitment":
        key = key_factory()
        return cls(key=key, digest=compute_commitment(key=key, move=move))

    def verify(self, move: str) -> bool:
        return verify_commitment(expected_commitment=self.digest, key=self.key, move=move)
