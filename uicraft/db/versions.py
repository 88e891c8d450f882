# uicraft/db/versions.py
"""
Version history store for generation results.

The generation core never numbers versions; numbering happens here when a
result is persisted.
"""
from datetime import datetime
from typing import Any, List, Optional

from bson.errors import InvalidId
from beanie import PydanticObjectId
from pydantic import BaseModel

from uicraft.core.exceptions import PersistenceError
from uicraft.core.logging import log
from uicraft.core.types import GenerationResult
from uicraft.models import UIVersion


class VersionRecord(BaseModel):
    """API view of a stored version."""
    id: str
    prompt: str
    plan: Any = None
    generatedCode: str
    explanation: str
    provider: str = ""
    version: int
    timestamp: datetime


def next_version(latest: Optional[int]) -> int:
    """Version number for a new entry given the highest stored one."""
    return (latest or 0) + 1


def to_record(doc: UIVersion) -> VersionRecord:
    return VersionRecord(
        id=str(doc.id),
        prompt=doc.prompt,
        plan=doc.plan,
        generatedCode=doc.generated_code,
        explanation=doc.explanation,
        provider=doc.provider,
        version=doc.version,
        timestamp=doc.timestamp,
    )


class VersionStore:
    """Beanie-backed history of generated UIs."""

    def ensure_available(self) -> None:
        """Raise PersistenceError when MongoDB is not connected."""
        from uicraft.db import is_connected, get_connection_error
        if not is_connected():
            raise PersistenceError(
                "Version history is unavailable",
                {"reason": get_connection_error()},
            )

    async def save(self, prompt: str, result: GenerationResult) -> VersionRecord:
        self.ensure_available()

        latest = await UIVersion.find_all().sort("-version").first_or_none()
        doc = UIVersion(
            prompt=prompt,
            plan=result.plan,
            generated_code=result.generated_code,
            explanation=result.explanation,
            provider=result.provider,
            version=next_version(latest.version if latest else None),
        )
        await doc.insert()
        log("DB", f"Saved version {doc.version} ({doc.id})")
        return to_record(doc)

    async def list_versions(self) -> List[VersionRecord]:
        self.ensure_available()
        docs = await UIVersion.find_all().sort("-timestamp").to_list()
        return [to_record(doc) for doc in docs]

    async def delete(self, version_id: str) -> bool:
        """Delete a version. Returns False when no such version exists."""
        self.ensure_available()
        try:
            object_id = PydanticObjectId(version_id)
        except (InvalidId, TypeError):
            return False

        doc = await UIVersion.get(object_id)
        if doc is None:
            return False
        await doc.delete()
        log("DB", f"Deleted version {version_id}")
        return True


_store = VersionStore()


def get_version_store() -> VersionStore:
    return _store
