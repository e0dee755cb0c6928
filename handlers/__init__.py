"""Text and I/O handlers for scriptbridge.

This package provides emoji handling used by script detection and the asynchronous HTTP
client used by the remote translation fallback.
"""

from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp
from handlers.emoji import EmojiHandler

__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
    "EmojiHandler",
]
