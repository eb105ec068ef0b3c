from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SeedResponse(BaseModel):
    message: str
    count: int


class SeedErrorResponse(BaseModel):
    error: str
    details: str


class FrameworkItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    version: str
    visible: bool
