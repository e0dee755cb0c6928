"""Unit tests for scriptbridge.

Tests use pytest with asyncio support. Network calls are replaced with fakes via monkeypatch.
"""
