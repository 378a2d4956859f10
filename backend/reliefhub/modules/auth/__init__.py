# Authentication module

from reliefhub.modules.auth.dependencies import (
    get_current_profile,
    get_current_actor,
    require_camp_admin,
    require_ngo,
)

__all__ = [
    "get_current_profile",
    "get_current_actor",
    "require_camp_admin",
    "require_ngo",
]
