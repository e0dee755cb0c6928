"""Core engine components for scriptbridge.

This package contains language and script handling, phrase dictionaries, result caching,
the translation queue and manager, and the shared data container wiring them together.
Submodules are imported explicitly to keep start-up import order predictable.
"""
