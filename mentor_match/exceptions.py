# mentor_match/exceptions.py
class BusinessLogicError(Exception):
    """Base exception for business logic errors"""
    status_code = 400

class InvalidTargetError(BusinessLogicError):
    """Raised when a request targets a user who is not a mentor"""
    pass

class InvalidStatusTransitionError(BusinessLogicError):
    """Raised when invalid status transition is attempted"""
    pass

class InvalidImageError(BusinessLogicError):
    """Raised when an uploaded profile image is rejected"""
    pass

class ForbiddenError(BusinessLogicError):
    """Raised when the caller does not own the resource"""
    status_code = 403

class NotFoundError(BusinessLogicError):
    """Raised when a resource is not found"""
    status_code = 404

class ConflictError(BusinessLogicError):
    """Raised when an operation would break a uniqueness or state rule"""
    status_code = 409

class PendingRequestExistsError(ConflictError):
    """Raised when a mentee already has a pending request"""
    pass

class DuplicateRequestError(ConflictError):
    """Raised when a request between the same mentee and mentor already exists"""
    pass

class AcceptedMatchExistsError(ConflictError):
    """Raised when a mentor already has an accepted request"""
    pass

class DuplicateUserError(ConflictError):
    """Raised when signing up with an email that is already registered"""
    pass

class InternalError(BusinessLogicError):
    """Raised when the store fails unexpectedly"""
    status_code = 500
