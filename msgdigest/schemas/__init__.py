"""
Error schemas for message digest construction.
"""

from .errors import (
    ErrorCodes,
    DigestError,
    MessageLengthError,
    DigestException,
    InvalidMessageLengthException,
    InvalidLength,
    HexDecodingException,
    UnsupportedHashAlgorithmException,
)

__all__ = [
    "ErrorCodes",
    "DigestError",
    "MessageLengthError",
    "DigestException",
    "InvalidMessageLengthException",
    "InvalidLength",
    "HexDecodingException",
    "UnsupportedHashAlgorithmException",
]
