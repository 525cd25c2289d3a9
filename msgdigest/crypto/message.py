"""
Message Digest Value Type
A (hashed) message input to an ECDSA signature.

This module provides:
- MESSAGE_SIZE: the required digest length (32 bytes)
- Message: immutable 32-byte digest with validated construction

Hard Contracts:
1. A Message always holds exactly MESSAGE_SIZE bytes; construction of
   any other length raises InvalidMessageLengthException
2. Equality and hashing cover all 32 bytes
3. Ordering is lexicographic over the bytes (for sorted collections only)
4. Text form is 64 lowercase hex characters, no prefix, no separators

The bytes MUST be a cryptographically secure hash of the actual message
being signed. Signing anything else does not produce a secure signature.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from msgdigest.schemas.errors import InvalidMessageLengthException


logger = logging.getLogger(__name__)

MESSAGE_SIZE: int = 32

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True, order=True)
class Message:
    """
    A 32-byte message digest, ready to be signed.

    Construct with Message.from_digest() when the caller already holds a
    32-byte hash output, or Message.from_bytes() for data of unknown length.

    Attributes:
        digest: The raw 32 digest bytes
    """
    digest: bytes = field(repr=False)

    def __post_init__(self) -> None:
        """Normalize to immutable bytes and enforce the length invariant."""
        if not isinstance(self.digest, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Message digest must be bytes-like, got {type(self.digest).__name__}"
            )
        data = bytes(self.digest)
        if len(data) != MESSAGE_SIZE:
            raise InvalidMessageLengthException(expected=MESSAGE_SIZE, actual=len(data))
        object.__setattr__(self, "digest", data)

    @classmethod
    def from_digest(cls, digest: bytes) -> Message:
        """
        Create a Message from a 32-byte hash output.

        For use with hash engines whose output is already MESSAGE_SIZE
        bytes (e.g. hashlib.sha256(...).digest()).

        Args:
            digest: Exactly 32 bytes

        Returns:
            Message wrapping the digest
        """
        return cls(digest)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> Message:
        """
        Create a Message from a bytes-like object of unknown length.

        This is the entry point for data arriving from untyped sources
        (deserialization, I/O).

        Args:
            data: Candidate digest bytes

        Returns:
            Message byte-identical to data

        Raises:
            InvalidMessageLengthException: If len(data) != MESSAGE_SIZE
        """
        try:
            return cls(data)
        except InvalidMessageLengthException as e:
            logger.debug(
                "Rejected message digest: expected %d bytes, got %d",
                e.expected,
                e.actual,
            )
            raise

    def __bytes__(self) -> bytes:
        return self.digest

    def __str__(self) -> str:
        return self.digest.hex()

    def __format__(self, format_spec: str) -> str:
        # Lowercase hex is the only rendering.
        if format_spec not in ("", "x"):
            raise ValueError(f"Unsupported format spec for Message: {format_spec!r}")
        return self.digest.hex()

    def __repr__(self) -> str:
        return f"Message({self.digest.hex()})"
