# uicraft/api/versions.py
"""
Version history routes.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from uicraft.db.versions import VersionRecord, VersionStore, get_version_store

router = APIRouter(prefix="/api/versions", tags=["Versions"])


@router.get("", response_model=List[VersionRecord])
async def list_versions(store: VersionStore = Depends(get_version_store)):
    """All stored versions, newest first."""
    return await store.list_versions()


@router.delete("/{version_id}")
async def delete_version(version_id: str, store: VersionStore = Depends(get_version_store)):
    if not await store.delete(version_id):
        raise HTTPException(status_code=404, detail=f"Version not found: {version_id}")
    return {"message": "Version deleted successfully"}
