"""Network translation engines.

Concrete implementations of TransInterface. Importing this package registers every engine in
TransInterface.registered under its distinguished name.

Modules:
- RemoteServiceTranslation: HTTP fallback against a configured translation service.
"""

from core.trans.engines.remote_service import RemoteServiceTranslation

__all__: list[str] = ["RemoteServiceTranslation"]
