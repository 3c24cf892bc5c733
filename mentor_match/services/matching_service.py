# mentor_match/services/matching_service.py
"""Matching-request lifecycle.

A request starts ``pending`` and can move once, by its mentor, to ``accepted``
or ``rejected``. Both of those are terminal. The checks done here before each
write give friendly errors; the unique constraints on ``matching_requests``
are what actually hold the rules under concurrent writers, so an
``IntegrityError`` on commit is reported as the matching conflict.
"""
from datetime import datetime, timezone
from typing import List, Optional, Union
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..models import MatchingRequest, MatchingStatus, User, UserRole
from ..schemas import MenteeMatchingRequestView, MentorMatchingRequestView
from ..constants import ErrorMessages
from ..exceptions import (
    ForbiddenError, InternalError, InvalidStatusTransitionError,
    PendingRequestExistsError, DuplicateRequestError, AcceptedMatchExistsError,
)
from ..utils.validation_utils import ValidationUtils
from ..utils.response_enricher import shape_for_mentee, shape_for_mentor

logger = logging.getLogger(__name__)

MatchingRequestView = Union[MenteeMatchingRequestView, MentorMatchingRequestView]

class MatchingService:
    def __init__(self, db: Session):
        self.db = db
        self.validator = ValidationUtils(db)

    def create_request(self, mentee_id: int, mentor_id: int, message: Optional[str] = None) -> MatchingRequest:
        """Creates a pending request from a mentee to a mentor"""
        self.validator.get_mentor_or_invalid(mentor_id)

        if self.validator.has_pending_request(mentee_id):
            raise PendingRequestExistsError(ErrorMessages.PENDING_REQUEST_EXISTS)
        if self.validator.pair_exists(mentee_id, mentor_id):
            raise DuplicateRequestError(ErrorMessages.DUPLICATE_REQUEST)

        request = MatchingRequest(
            mentee_id=mentee_id,
            mentor_id=mentor_id,
            message=message or "",
            status=MatchingStatus.PENDING.value,
        )
        try:
            self.db.add(request)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Constraint rejected request from mentee {mentee_id} to mentor {mentor_id}: {e.orig}")
            raise self._insert_conflict(mentee_id, mentor_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error creating request from mentee {mentee_id} to mentor {mentor_id}: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)

        self.db.refresh(request)
        logger.info(f"Matching request {request.id} created: mentee {mentee_id} -> mentor {mentor_id}")
        return request

    def list_requests(self, caller_id: int, caller_role: str) -> List[MatchingRequestView]:
        """Lists the caller's requests, newest first, shaped for the caller's role"""
        try:
            if caller_role == UserRole.MENTEE.value:
                rows = self._requests_with_counterpart(MatchingRequest.mentee_id, MatchingRequest.mentor_id, caller_id)
                return [shape_for_mentee(request, mentor) for request, mentor in rows]
            if caller_role == UserRole.MENTOR.value:
                rows = self._requests_with_counterpart(MatchingRequest.mentor_id, MatchingRequest.mentee_id, caller_id)
                return [shape_for_mentor(request, mentee) for request, mentee in rows]
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error listing requests for user {caller_id}: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)
        return []

    def update_status(self, request_id: int, new_status: Union[str, MatchingStatus], caller_id: int) -> MatchingRequest:
        """Moves a pending request to accepted or rejected on behalf of its mentor"""
        try:
            target = MatchingStatus(new_status)
        except ValueError:
            raise InvalidStatusTransitionError(ErrorMessages.INVALID_STATUS)
        if target == MatchingStatus.PENDING:
            raise InvalidStatusTransitionError(ErrorMessages.INVALID_STATUS)

        request = self.validator.get_request_or_404(request_id)
        if request.mentor_id != caller_id:
            raise ForbiddenError(ErrorMessages.ACCESS_DENIED)
        self.validator.validate_request_status(request, MatchingStatus.PENDING)

        if target == MatchingStatus.ACCEPTED and self.validator.has_accepted_request(caller_id):
            raise AcceptedMatchExistsError(ErrorMessages.ACCEPTED_MATCH_EXISTS)

        request.status = target.value
        request.updated_at = datetime.now(timezone.utc)
        try:
            self.db.add(request)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if target == MatchingStatus.ACCEPTED:
                logger.warning(f"Constraint rejected accept for request {request_id}: {e.orig}")
                raise AcceptedMatchExistsError(ErrorMessages.ACCEPTED_MATCH_EXISTS)
            logger.error(f"Integrity error updating request {request_id} to {target.value}: {e.orig}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error updating request {request_id}: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)

        self.db.refresh(request)
        logger.info(f"Matching request {request_id} {target.value} by mentor {caller_id}")
        return request

    def delete_request(self, request_id: int, caller_id: int) -> None:
        """Deletes a request in any status on behalf of the mentee who sent it"""
        request = self.validator.get_request_or_404(request_id)
        if request.mentee_id != caller_id:
            raise ForbiddenError(ErrorMessages.ACCESS_DENIED)

        try:
            self.db.delete(request)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error deleting request {request_id}: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)

        logger.info(f"Matching request {request_id} deleted by mentee {caller_id}")

    def _requests_with_counterpart(self, owner_column, counterpart_column, caller_id: int):
        return (
            self.db.query(MatchingRequest, User)
            .join(User, counterpart_column == User.id)
            .filter(owner_column == caller_id)
            .order_by(MatchingRequest.created_at.desc(), MatchingRequest.id.desc())
            .all()
        )

    def _insert_conflict(self, mentee_id: int, mentor_id: int):
        # Work out which constraint a concurrent writer beat us to
        if self.validator.pair_exists(mentee_id, mentor_id):
            return DuplicateRequestError(ErrorMessages.DUPLICATE_REQUEST)
        if self.validator.has_pending_request(mentee_id):
            return PendingRequestExistsError(ErrorMessages.PENDING_REQUEST_EXISTS)
        return DuplicateRequestError(ErrorMessages.DUPLICATE_REQUEST)
