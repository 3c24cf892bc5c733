# mentor_match/services/user_service.py
from typing import Optional
from datetime import datetime, timezone
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..config import get_settings
from ..models import User, UserRole
from ..schemas import SignupRequest, ProfileUpdate, ProfileDetails, UserProfileResponse
from ..security import get_password_hash, get_user_by_email, get_user_by_id
from ..constants import ErrorMessages, DefaultAccounts
from ..exceptions import BusinessLogicError, DuplicateUserError, InternalError, NotFoundError
from ..utils.profile_utils import encode_skills, image_url_for, skills_for, validate_image

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    def create_user(self, data: SignupRequest) -> User:
        """Registers a mentor or mentee; the role cannot change afterwards"""
        if get_user_by_email(self.db, data.email):
            raise DuplicateUserError(ErrorMessages.USER_EXISTS)

        user = User(
            email=data.email,
            hashed_password=get_password_hash(data.password),
            name=data.name,
            role=data.role.value,
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Signup for {data.email} hit a constraint: {e.orig}")
            raise DuplicateUserError(ErrorMessages.USER_EXISTS)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error creating user {data.email}: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)

        self.db.refresh(user)
        logger.info(f"User {user.id} created with role {user.role}")
        return user

    def get_profile(self, user: User) -> UserProfileResponse:
        return UserProfileResponse(
            id=user.id,
            email=user.email,
            role=user.role,
            profile=ProfileDetails(
                name=user.name,
                bio=user.bio or "",
                imageUrl=image_url_for(user),
                skills=skills_for(user),
            ),
        )

    def update_profile(self, user: User, data: ProfileUpdate) -> User:
        """Updates name, bio and, for mentors only, skills"""
        if data.name:
            user.name = data.name
        if data.bio is not None:
            user.bio = data.bio
        if data.skills is not None and user.role == UserRole.MENTOR.value:
            user.skills = encode_skills(data.skills)

        user.updated_at = datetime.now(timezone.utc)
        self._save(user, "updating profile")
        logger.info(f"User {user.id} updated profile")
        return user

    def update_image(self, user: User, content: bytes, content_type: Optional[str]) -> str:
        """Stores a profile image and returns the URL it is served from"""
        validate_image(content, content_type, self.settings.MAX_IMAGE_SIZE_BYTES)

        user.image_data = content
        user.image_type = content_type
        user.updated_at = datetime.now(timezone.utc)
        self._save(user, "uploading image")
        logger.info(f"User {user.id} uploaded a {content_type} image ({len(content)} bytes)")
        return image_url_for(user)

    def get_user_for_image(self, role: str, user_id: int) -> User:
        if role not in (UserRole.MENTOR.value, UserRole.MENTEE.value):
            raise BusinessLogicError(ErrorMessages.INVALID_ROLE)
        user = get_user_by_id(self.db, user_id)
        if not user or user.role != role:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND)
        return user

    def seed_default_accounts(self) -> None:
        """Creates the demo mentor and mentee accounts if they are missing"""
        defaults = [
            (DefaultAccounts.MENTOR_EMAIL, DefaultAccounts.MENTOR_NAME, UserRole.MENTOR,
             DefaultAccounts.MENTOR_BIO, DefaultAccounts.MENTOR_SKILLS),
            (DefaultAccounts.MENTEE_EMAIL, DefaultAccounts.MENTEE_NAME, UserRole.MENTEE,
             DefaultAccounts.MENTEE_BIO, None),
        ]
        for email, name, role, bio, skills in defaults:
            if get_user_by_email(self.db, email):
                continue
            user = User(
                email=email,
                hashed_password=get_password_hash(DefaultAccounts.PASSWORD),
                name=name,
                role=role.value,
                bio=bio,
                skills=encode_skills(skills) if skills is not None else None,
            )
            self._save(user, "seeding default account")
            logger.info(f"Default {role.value} account created: {email}")

    def _save(self, user: User, action: str) -> None:
        try:
            self.db.add(user)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error {action} for {user.email}: {e}")
            raise InternalError(ErrorMessages.INTERNAL_ERROR)
        self.db.refresh(user)
