"""
Hashing Adapters
Bridges between hash engines / hex text and the Message digest type.

This module provides:
- SHA-256 and double SHA-256 of raw bytes
- hash_message: hash arbitrary data straight into a Message
- message_from_hex / to_hex: canonical hex text in and out

Security/Determinism Notes:
- Only algorithms with a 32-byte output are accepted
- Hex decoding goes through Message.from_bytes, so length is always checked
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
import logging
from typing import Callable, Optional, Union

from msgdigest.config.runtime import get_default_config
from msgdigest.crypto.message import MESSAGE_SIZE, Message
from msgdigest.schemas.errors import (
    HexDecodingException,
    UnsupportedHashAlgorithmException,
)


logger = logging.getLogger(__name__)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def double_sha256(data: bytes) -> bytes:
    """Compute SHA-256(SHA-256(data))."""
    return sha256(sha256(data))


HASH_ALGORITHMS: dict[str, Callable[[bytes], bytes]] = {
    "sha256": sha256,
    "double_sha256": double_sha256,
    "sha3_256": lambda data: hashlib.sha3_256(data).digest(),
    "blake2s": lambda data: hashlib.blake2s(data, digest_size=MESSAGE_SIZE).digest(),
}


def hash_message(data: bytes, algorithm: Optional[str] = None) -> Message:
    """
    Hash raw bytes into a Message ready for signing.

    Args:
        data: The message bytes to hash
        algorithm: One of HASH_ALGORITHMS; defaults to the configured
                   hashing.algorithm

    Returns:
        Message wrapping the 32-byte digest

    Raises:
        UnsupportedHashAlgorithmException: If algorithm is not known

    Example:
        >>> str(hash_message(b"hello"))
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    if algorithm is None:
        algorithm = get_default_config().hashing.algorithm

    hasher = HASH_ALGORITHMS.get(algorithm.lower()) if isinstance(algorithm, str) else None
    if hasher is None:
        logger.debug("Unsupported hash algorithm requested: %s", algorithm)
        raise UnsupportedHashAlgorithmException(
            algorithm, details={"supported": sorted(HASH_ALGORITHMS)}
        )

    return Message.from_digest(hasher(data))


def message_from_hex(hex_string: str) -> Message:
    """
    Decode a hex-encoded digest into a Message.

    Accepts an optional 0x prefix and either letter case.

    Raises:
        HexDecodingException: If the string is not valid hex
        InvalidMessageLengthException: If it does not decode to 32 bytes

    Example:
        >>> message_from_hex("00" * 32) == Message.from_digest(bytes(32))
        True
    """
    hex_content = hex_string[2:] if hex_string.startswith(("0x", "0X")) else hex_string

    if len(hex_content) % 2 != 0:
        raise HexDecodingException(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    # bytes.fromhex tolerates whitespace, which a digest never contains
    if any(c.isspace() for c in hex_content):
        raise HexDecodingException("Hex string must not contain whitespace")

    try:
        data = bytes.fromhex(hex_content)
    except ValueError as e:
        raise HexDecodingException(f"Invalid hex characters in string: {e}") from e

    return Message.from_bytes(data)


def to_hex(value: Union[Message, bytes]) -> str:
    """
    Render a Message or raw bytes as unprefixed lowercase hex.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        'deadbeef'
    """
    return bytes(value).hex()


__all__ = [
    "HASH_ALGORITHMS",
    "sha256",
    "double_sha256",
    "hash_message",
    "message_from_hex",
    "to_hex",
]
