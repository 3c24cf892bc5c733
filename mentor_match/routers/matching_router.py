# mentor_match/routers/matching_router.py
from fastapi import APIRouter, Depends, HTTPException, Path
from typing import List, Union

from ..services import MatchingService
from ..dependencies.auth_dependencies import get_current_mentee, get_current_mentor
from ..dependencies.service_dependencies import get_matching_service
from ..schemas import (
    MatchingRequestCreate, MatchingRequestCreated, MatchingStatusUpdate, MessageResponse,
    MenteeMatchingRequestView, MentorMatchingRequestView,
)
from ..models import User
from ..security import get_current_user
from ..constants import SuccessMessages
from ..exceptions import BusinessLogicError

router = APIRouter(prefix="/api", tags=["matching"])

@router.post("/matching-requests", response_model=MatchingRequestCreated, status_code=201)
async def create_matching_request(
    payload: MatchingRequestCreate,
    current_mentee: User = Depends(get_current_mentee),
    matching_service: MatchingService = Depends(get_matching_service)
):
    """Create a matching request (mentee only)"""
    try:
        request = matching_service.create_request(current_mentee.id, payload.mentor_id, payload.message)
        return MatchingRequestCreated(message=SuccessMessages.REQUEST_CREATED, requestId=request.id)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.get(
    "/matching-requests",
    response_model=List[Union[MenteeMatchingRequestView, MentorMatchingRequestView]],
)
async def list_matching_requests(
    current_user: User = Depends(get_current_user),
    matching_service: MatchingService = Depends(get_matching_service)
):
    """Get matching requests; mentees see the mentors they asked, mentors see who asked them"""
    try:
        return matching_service.list_requests(current_user.id, current_user.role)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.put("/matching-requests/{request_id}", response_model=MessageResponse)
async def update_matching_request_status(
    payload: MatchingStatusUpdate,
    request_id: int = Path(..., description="The ID of the matching request"),
    current_mentor: User = Depends(get_current_mentor),
    matching_service: MatchingService = Depends(get_matching_service)
):
    """Accept or reject a pending matching request (mentor only)"""
    try:
        request = matching_service.update_status(request_id, payload.status, current_mentor.id)
        return MessageResponse(message=SuccessMessages.request_status_changed(request.status))
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.delete("/matching-requests/{request_id}", response_model=MessageResponse)
async def delete_matching_request(
    request_id: int = Path(..., description="The ID of the matching request"),
    current_mentee: User = Depends(get_current_mentee),
    matching_service: MatchingService = Depends(get_matching_service)
):
    """Delete a matching request in any status (owning mentee only)"""
    try:
        matching_service.delete_request(request_id, current_mentee.id)
        return MessageResponse(message=SuccessMessages.REQUEST_DELETED)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
