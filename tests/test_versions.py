"""
Version numbering and store availability.
"""
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from uicraft.core.exceptions import PersistenceError
from uicraft.core.types import GenerationResult
from uicraft.db.versions import VersionStore, next_version, to_record


def test_first_version_is_one():
    assert next_version(None) == 1
    assert next_version(0) == 1


def test_versions_increment():
    assert next_version(1) == 2
    assert next_version(41) == 42


def test_to_record_uses_wire_names():
    stamp = datetime(2026, 1, 1, tzinfo=timezone.utc)
    doc = SimpleNamespace(
        id="65a1b2c3d4e5f6a7b8c9d0e1",
        prompt="create a login form",
        plan={"layout": "Container"},
        generated_code="render(<App />);",
        explanation="why",
        provider="groq",
        version=3,
        timestamp=stamp,
    )

    record = to_record(doc)

    assert record.id == "65a1b2c3d4e5f6a7b8c9d0e1"
    assert record.generatedCode == "render(<App />);"
    assert record.version == 3
    assert record.model_dump()["provider"] == "groq"


@pytest.mark.asyncio
async def test_store_unavailable_without_database():
    store = VersionStore()
    result = GenerationResult(plan={}, generated_code="", explanation="", provider="gemini")

    with pytest.raises(PersistenceError) as exc_info:
        store.ensure_available()
    assert exc_info.value.message == "Version history is unavailable"
    with pytest.raises(PersistenceError):
        await store.save("prompt", result)
    with pytest.raises(PersistenceError):
        await store.list_versions()
    with pytest.raises(PersistenceError):
        await store.delete("65a1b2c3d4e5f6a7b8c9d0e1")


@pytest.mark.asyncio
async def test_in_memory_store_numbers_sequentially(version_store):
    result = GenerationResult(plan={}, generated_code="c", explanation="e", provider="gemini")

    first = await version_store.save("one", result)
    second = await version_store.save("two", result)

    assert (first.version, second.version) == (1, 2)
