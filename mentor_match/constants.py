# mentor_match/constants.py
class ErrorMessages:
    INVALID_MENTOR = "Invalid mentor"
    PENDING_REQUEST_EXISTS = "You already have a pending matching request"
    DUPLICATE_REQUEST = "You have already sent a request to this mentor"
    REQUEST_NOT_FOUND = "Matching request not found"
    ACCESS_DENIED = "Access denied"
    REQUEST_NOT_PENDING = "Request is no longer pending"
    INVALID_STATUS = "Status must be accepted or rejected"
    ACCEPTED_MATCH_EXISTS = "You already have an accepted matching request"
    USER_EXISTS = "User already exists"
    USER_NOT_FOUND = "User not found"
    INVALID_CREDENTIALS = "Invalid credentials"
    INVALID_ROLE = "Invalid role"
    NO_IMAGE = "No image file provided"
    IMAGE_TYPE_NOT_ALLOWED = "Only JPG and PNG files are allowed"
    IMAGE_TOO_LARGE = "Image must be 1MB or smaller"
    INVALID_IMAGE_FORMAT = "Invalid image format"
    INTERNAL_ERROR = "Internal server error"
    TOO_MANY_REQUESTS = "Too many requests, please try again later."

class SuccessMessages:
    REQUEST_CREATED = "Matching request created successfully"
    REQUEST_DELETED = "Matching request deleted successfully"
    USER_CREATED = "User created successfully"
    PROFILE_UPDATED = "Profile updated successfully"
    IMAGE_UPLOADED = "Image uploaded successfully"

    @staticmethod
    def request_status_changed(status: str) -> str:
        return f"Matching request {status} successfully"

class BusinessRules:
    MIN_PASSWORD_LENGTH = 6
    MIN_NAME_LENGTH = 1
    ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png")
    PNG_SIGNATURE = b"\x89PNG"
    JPEG_SIGNATURE = b"\xff\xd8\xff"

class DefaultAccounts:
    PASSWORD = "password123"
    MENTOR_EMAIL = "mentor@test.com"
    MENTOR_NAME = "김멘토"
    MENTOR_BIO = "5년차 풀스택 개발자입니다. React, Node.js 전문가로 멘티를 도와드리겠습니다."
    MENTOR_SKILLS = ["React", "Node.js", "TypeScript", "JavaScript", "AWS"]
    MENTEE_EMAIL = "mentee@test.com"
    MENTEE_NAME = "김멘티"
    MENTEE_BIO = "React를 배우고 싶은 신입 개발자입니다. 멘토링을 통해 성장하고 싶습니다."
