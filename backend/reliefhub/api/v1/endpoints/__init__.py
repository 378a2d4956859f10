# API endpoints
from . import health, profiles, camps, needs, assistance, volunteers, dashboard

__all__ = ["health", "profiles", "camps", "needs", "assistance", "volunteers", "dashboard"]
