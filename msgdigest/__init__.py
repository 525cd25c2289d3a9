"""
msgdigest - fixed-length message digests for signing algorithms.
"""

from msgdigest.crypto.message import MESSAGE_SIZE, Message
from msgdigest.schemas.errors import InvalidLength, InvalidMessageLengthException

__version__ = "0.1.0"

__all__ = [
    "MESSAGE_SIZE",
    "Message",
    "InvalidLength",
    "InvalidMessageLengthException",
]
