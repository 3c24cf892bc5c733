# mentor_match/services/mentor_service.py
from typing import List, Optional
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from ..models import User, UserRole
from ..schemas import MentorListItem
from ..constants import ErrorMessages
from ..exceptions import InternalError
from ..utils.profile_utils import image_url_for, parse_skills

logger = logging.getLogger(__name__)

class MentorService:
    def __init__(self, db: Session):
        self.db = db

    def list_mentors(self, skill: Optional[str] = None, sort_by: str = "name", sort_order: str = "asc") -> List[MentorListItem]:
        """Lists mentors, optionally filtered by a skill substring and sorted by name or skills"""
        try:
            mentors = self.db.query(User).filter(User.role == UserRole.MENTOR.value).order_by(User.name).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error listing mentors: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)

        items = [
            MentorListItem(
                id=mentor.id,
                name=mentor.name,
                bio=mentor.bio or "",
                imageUrl=image_url_for(mentor),
                skills=parse_skills(mentor.skills),
            )
            for mentor in mentors
        ]

        if skill:
            needle = skill.lower()
            items = [item for item in items if any(needle in s.lower() for s in item.skills)]

        if sort_by == "skills":
            sort_key = lambda item: ", ".join(item.skills).casefold()
        else:
            sort_key = lambda item: item.name.casefold()
        return sorted(items, key=sort_key, reverse=(sort_order == "desc"))
