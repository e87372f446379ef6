"""api/routes/tools.py — Practice tool endpoints.

POST /tools/call  — Run a practice tool (scale_exercise, arpeggio_exercise,
                    voice_led_progression) by name with a params dict.
GET  /tools/list  — List the practice tools with their parameter schemas
                    and allowed choices.

Tools run with the same EngineConfig as /theory and /practice, so a custom
pitch window gives the same voicings on every surface. Tool errors come back
in the body (success=False, error=str); only an unknown tool name is an
HTTP error.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_engine_config
from core.config import EngineConfig
from tools.registry import get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class ToolCallRequest(BaseModel):
    """POST /tools/call request body."""

    name: str
    """Practice tool name, e.g. "voice_led_progression"."""

    params: dict[str, Any] = Field(default_factory=dict)
    """Tool parameters, e.g. {"key": "D", "mode": "minor", "progression": "ii-V-I"}."""


class ToolCallResponse(BaseModel):
    """POST /tools/call response body (mirrors ToolResult)."""

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/call", response_model=ToolCallResponse)
def call_tool(
    request: ToolCallRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> ToolCallResponse:
    """Run a practice tool under the service's engine config.

    Raises:
        HTTPException(404): No practice tool has that name.
    """
    registry = get_registry()
    tool = registry.get(request.name)
    if tool is None:
        available = [t["name"] for t in registry.list_tools()]
        raise HTTPException(
            status_code=404,
            detail=f"Unknown practice tool '{request.name}'. Available: {available}",
        )

    result = tool.with_config(config)(**request.params)
    logger.debug("tool %s success=%s", request.name, result.success)
    return ToolCallResponse(
        success=result.success,
        data=result.data,
        error=result.error,
        metadata=result.metadata,
    )


@router.get("/list")
def list_tools() -> list[dict[str, Any]]:
    """List the practice tools with parameters, defaults and choices."""
    return get_registry().list_tools()
