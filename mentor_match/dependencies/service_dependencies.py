# mentor_match/dependencies/service_dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.matching_service import MatchingService
from ..services.user_service import UserService
from ..services.mentor_service import MentorService

def get_matching_service(db: Session = Depends(get_db)) -> MatchingService:
    return MatchingService(db)

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)

def get_mentor_service(db: Session = Depends(get_db)) -> MentorService:
    return MentorService(db)
