# mentor_match/routers/__init__.py
from . import auth_router
from . import profile_router
from . import mentor_router
from . import matching_router

__all__ = [
    "auth_router",
    "profile_router",
    "mentor_router",
    "matching_router"
]
