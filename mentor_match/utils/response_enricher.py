# mentor_match/utils/response_enricher.py
from typing import Any, Dict
from ..models import MatchingRequest, User
from ..schemas import MenteeMatchingRequestView, MentorMatchingRequestView
from .profile_utils import normalize_skills_json

def _base_fields(request: MatchingRequest) -> Dict[str, Any]:
    return {
        "id": request.id,
        "mentee_id": request.mentee_id,
        "mentor_id": request.mentor_id,
        "message": request.message or "",
        "status": request.status,
        "created_at": request.created_at,
        "updated_at": request.updated_at,
    }

def shape_for_mentee(request: MatchingRequest, mentor: User) -> MenteeMatchingRequestView:
    """A mentee sees who they asked: the mentor's name, bio and skills."""
    return MenteeMatchingRequestView(
        **_base_fields(request),
        mentor_name=mentor.name,
        mentor_bio=mentor.bio,
        mentor_skills=normalize_skills_json(mentor.skills),
    )

def shape_for_mentor(request: MatchingRequest, mentee: User) -> MentorMatchingRequestView:
    """A mentor sees who asked them: the mentee's name and bio."""
    return MentorMatchingRequestView(
        **_base_fields(request),
        mentee_name=mentee.name,
        mentee_bio=mentee.bio,
    )
