from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..schemas import FrameworkItem, SeedErrorResponse, SeedResponse
from ..services.framework_seeder import FrameworkSeeder, SeedFailure
from ..store import SqlAlchemyFrameworkStore, get_framework_store

router = APIRouter(prefix="/api/frameworks", tags=["frameworks"])


@router.get(
    "/seed",
    response_model=SeedResponse,
    summary="Seed the default compliance frameworks",
    description="Inserts the built-in framework set when no frameworks exist yet.",
    responses={
        200: {
            "description": "Frameworks seeded or already present",
            "content": {
                "application/json": {
                    "example": {"message": "Frameworks successfully seeded!", "count": 5},
                }
            },
        },
        500: {"model": SeedErrorResponse, "description": "Seeding failed"},
    },
)
async def seed_frameworks(store: SqlAlchemyFrameworkStore = Depends(get_framework_store)):
    outcome = FrameworkSeeder(store).seed()
    if isinstance(outcome, SeedFailure):
        return JSONResponse(
            status_code=500,
            content=SeedErrorResponse(error=outcome.error, details=outcome.details).model_dump(),
        )
    return SeedResponse(message=outcome.message, count=outcome.count)


@router.get("", response_model=list[FrameworkItem])
async def list_frameworks(
    include_hidden: bool = Query(default=False),
    store: SqlAlchemyFrameworkStore = Depends(get_framework_store),
) -> list[FrameworkItem]:
    rows = store.list_frameworks(include_hidden=include_hidden)
    return [FrameworkItem.model_validate(row) for row in rows]
