"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import (
    DEFAULT_HOST,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_PORT,
    ConfigManager,
    is_valid_port,
)

router = APIRouter()

UPLOAD_CAP_EXCEEDED = f"maxFileSize cannot exceed {DEFAULT_MAX_FILE_SIZE} bytes (10MB)"
INVALID_PORT = "port must be an integer between 1 and 65535"


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: dict | None = None
    upload: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    upload: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        upload=config.get("upload", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.upload and "maxFileSize" in request.upload:
        max_size = request.upload["maxFileSize"]
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
            raise HTTPException(status_code=400, detail="maxFileSize must be a positive integer")
        if max_size > DEFAULT_MAX_FILE_SIZE:
            raise HTTPException(status_code=400, detail=UPLOAD_CAP_EXCEEDED)
    if request.server:
        host = request.server.get("host", DEFAULT_HOST)
        port = request.server.get("port", DEFAULT_PORT)
        if not isinstance(host, str) or not host:
            raise HTTPException(status_code=400, detail="host must be a non-empty string")
        if not is_valid_port(port):
            raise HTTPException(status_code=400, detail=INVALID_PORT)

    try:
        for section in ("upload", "server"):
            values = getattr(request, section)
            if values:
                config_manager.set(section, {**current_config.get(section, {}), **values})
    except RuntimeError as e:
        print(f"[Config] {e}")
        raise HTTPException(status_code=500, detail="Failed to save configuration.")

    return {"status": "success", "message": "Configuration updated"}
