"""
Message digest type and hashing adapters.

Usage:
    from msgdigest.crypto import Message, hash_message

    msg = hash_message(b"payload")          # Message
    same = Message.from_bytes(bytes(msg))   # validated, 32 bytes only
    print(msg)                              # 64 lowercase hex chars
"""
from .message import (
    MESSAGE_SIZE,
    Message,
)
from .hashing import (
    HASH_ALGORITHMS,
    sha256,
    double_sha256,
    hash_message,
    message_from_hex,
    to_hex,
)

__all__ = [
    "MESSAGE_SIZE",
    "Message",
    "HASH_ALGORITHMS",
    "sha256",
    "double_sha256",
    "hash_message",
    "message_from_hex",
    "to_hex",
]
