# mentor_match/utils/validation_utils.py
from typing import Optional
from sqlalchemy.orm import Session
from ..models import User, UserRole, MatchingRequest, MatchingStatus
from ..exceptions import NotFoundError, InvalidTargetError, InvalidStatusTransitionError
from ..constants import ErrorMessages

class ValidationUtils:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_mentor_or_invalid(self, mentor_id: int) -> User:
        mentor = self.get_user(mentor_id) if mentor_id and mentor_id > 0 else None
        if not mentor or mentor.role != UserRole.MENTOR.value:
            raise InvalidTargetError(ErrorMessages.INVALID_MENTOR)
        return mentor

    def get_request_or_404(self, request_id: int) -> MatchingRequest:
        request = self.db.query(MatchingRequest).filter(MatchingRequest.id == request_id).first()
        if not request:
            raise NotFoundError(ErrorMessages.REQUEST_NOT_FOUND)
        return request

    def has_pending_request(self, mentee_id: int) -> bool:
        return self.db.query(MatchingRequest.id).filter(
            MatchingRequest.mentee_id == mentee_id,
            MatchingRequest.status == MatchingStatus.PENDING.value
        ).first() is not None

    def has_accepted_request(self, mentor_id: int) -> bool:
        return self.db.query(MatchingRequest.id).filter(
            MatchingRequest.mentor_id == mentor_id,
            MatchingRequest.status == MatchingStatus.ACCEPTED.value
        ).first() is not None

    def pair_exists(self, mentee_id: int, mentor_id: int) -> bool:
        return self.db.query(MatchingRequest.id).filter(
            MatchingRequest.mentee_id == mentee_id,
            MatchingRequest.mentor_id == mentor_id
        ).first() is not None

    def validate_request_status(self, request: MatchingRequest, expected_status: MatchingStatus):
        if request.status != expected_status.value:
            raise InvalidStatusTransitionError(ErrorMessages.REQUEST_NOT_PENDING)
