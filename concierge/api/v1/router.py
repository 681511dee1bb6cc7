"""API v1 main router - aggregates all domain routers."""

from fastapi import APIRouter

from concierge.api.v1.endpoints import chat, health, plans, recommendations, weather

api_router = APIRouter()

# Include health check endpoint
api_router.include_router(
    health.router,
    tags=["Health"],
)

# Include conversation endpoints
api_router.include_router(
    chat.router,
    prefix="/chat",
    tags=["Chat"],
)

# Include stateless plan generation
api_router.include_router(
    plans.router,
    prefix="/plans",
    tags=["Plans"],
)

# Include weather lookup
api_router.include_router(
    weather.router,
    prefix="/weather",
    tags=["Weather"],
)

# Include hotel and event recommendations
api_router.include_router(
    recommendations.router,
    prefix="/recommendations",
    tags=["Recommendations"],
)
