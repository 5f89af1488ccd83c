from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class HeadingModel(BaseModel):
    level: int = Field(ge=1, le=6)
    title: str
    slug: str


class HeadingListResponse(BaseModel):
    items: List[HeadingModel]


class HealthResponse(BaseModel):
    status: str


__all__ = ["HeadingModel", "HeadingListResponse", "HealthResponse"]
