# mentor_match/routers/mentor_router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Literal, Optional

from ..services import MentorService
from ..dependencies.auth_dependencies import get_current_mentee
from ..dependencies.service_dependencies import get_mentor_service
from ..schemas import MentorListItem
from ..models import User
from ..exceptions import BusinessLogicError

router = APIRouter(prefix="/api", tags=["mentors"])

@router.get("/mentors", response_model=List[MentorListItem])
async def list_mentors(
    skill: Optional[str] = Query(None, description="Filter by skill"),
    sort_by: Literal["name", "skills"] = Query("name", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("asc", alias="sortOrder"),
    current_mentee: User = Depends(get_current_mentee),
    mentor_service: MentorService = Depends(get_mentor_service)
):
    """Get the list of mentors (mentee only)"""
    try:
        return mentor_service.list_mentors(skill=skill, sort_by=sort_by, sort_order=sort_order)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
