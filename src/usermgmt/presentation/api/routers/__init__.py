from usermgmt.presentation.api.routers.profiles import router as profiles_router
from usermgmt.presentation.api.routers.roles import router as roles_router

__all__ = [
    "profiles_router",
    "roles_router",
]
