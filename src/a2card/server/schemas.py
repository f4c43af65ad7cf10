"""Pydantic schemas used by the FastAPI server."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class GraphPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    components: List[Any] = Field(default_factory=list)
    root_component_id: Any = Field("", alias="rootComponentId")
    data_model: Any = Field(None, alias="dataModel")


class ConvertResponse(BaseModel):
    card: Dict[str, Any]


class ReplyRequest(BaseModel):
    text: str = Field(..., description="Raw model output, normally a JSON object")


class ReplyResponse(BaseModel):
    text: str
    attachments: List[Dict[str, Any]] = Field(default_factory=list)
