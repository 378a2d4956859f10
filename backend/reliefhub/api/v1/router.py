from fastapi import APIRouter
from reliefhub.api.v1.endpoints import health, profiles, camps, needs, assistance, volunteers, dashboard

api_router = APIRouter()

# Deep health checks (/health/live, /health/ready)
api_router.include_router(health.router)


# Simple health check for load balancers
@api_router.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "service": "reliefhub-backend"}


api_router.include_router(profiles.router, prefix="/profiles", tags=["Profiles"])
api_router.include_router(camps.router, prefix="/camps", tags=["Camps"])
api_router.include_router(needs.router, prefix="/needs", tags=["Needs"])
api_router.include_router(assistance.router, prefix="/assistance", tags=["Assistance"])
api_router.include_router(volunteers.router, prefix="/volunteers", tags=["Volunteers"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
