"""FastAPI routes for the version publishing workflow."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from ucdpublisher.modules.ucdeploy.service.manager import VersionPublishService

router = APIRouter(prefix="/ucdeploy", tags=["ucdeploy"])


def get_service(request: Request) -> VersionPublishService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "publish_service", None):
        raise HTTPException(status_code=500, detail="Version publish service not initialized.")
    return container.publish_service


@router.post("/version")
def create_version(payload: Dict[str, Any], svc: VersionPublishService = Depends(get_service)):
    if not isinstance(payload.get("version"), dict):
        raise HTTPException(status_code=400, detail="version must be an object")
    return svc.create_version(payload).as_dict()


@router.post("/version/files")
def upload_files(payload: Dict[str, Any], svc: VersionPublishService = Depends(get_service)):
    return svc.upload_files(payload).as_dict()
