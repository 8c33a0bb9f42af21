"""
GrubDash — Health endpoint
"""
from fastapi import APIRouter, Request

from grubdash.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    state = request.app.state
    settings = state.settings
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        collections={"dishes": len(state.dishes), "orders": len(state.orders)},
    )
