from __future__ import annotations

import dataclasses

import pytest

from models.translation_models import PRIORITIES, TranslationResult, TranslationTask


def test_passthrough_returns_input_unchanged() -> None:
    result: TranslationResult = TranslationResult.passthrough("hello", "english", "hindi", error="timeout")

    assert result.text == result.original_text == "hello"
    assert result.is_translated is False
    assert result.method == "passthrough"
    assert result.confidence == 0.0
    assert result.error == "timeout"


def test_translation_result_is_immutable() -> None:
    result: TranslationResult = TranslationResult.passthrough("hello", "english", "hindi")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.text = "changed"  # type: ignore[misc]


def test_tasks_get_unique_ids_and_compare_without_future() -> None:
    first = TranslationTask(text="hello", source_language="english", target_language="hindi")
    second = TranslationTask(text="hello", source_language="english", target_language="hindi")

    assert first.task_id != second.task_id
    assert first.priority == "normal"
    assert first.kind == "translate"
    assert first.future is None
    assert dataclasses.replace(first, future=None) == first


def test_priorities_are_in_dispatch_order() -> None:
    assert PRIORITIES == ("high", "normal", "low")
