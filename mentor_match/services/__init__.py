# mentor_match/services/__init__.py
from .matching_service import MatchingService
from .user_service import UserService
from .mentor_service import MentorService

__all__ = ["MatchingService", "UserService", "MentorService"]
