"""Translation result cache package.

Provides the TTL-bounded result cache shared by the synchronous and queued APIs.
"""

from __future__ import annotations

from core.cache.manager import ResultCache

__all__: list[str] = ["ResultCache"]
