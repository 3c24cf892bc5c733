# mentor_match/utils/profile_utils.py
import json
import logging
from typing import List, Optional

from ..models import User, UserRole
from ..constants import BusinessRules, ErrorMessages
from ..exceptions import InvalidImageError

logger = logging.getLogger(__name__)

def parse_skills(raw: Optional[str]) -> List[str]:
    """Decodes the stored skills column; anything unreadable counts as no skills."""
    if not raw:
        return []
    try:
        skills = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed skills value: %r", raw)
        return []
    if not isinstance(skills, list):
        return []
    return [str(skill) for skill in skills]

def encode_skills(skills: List[str]) -> str:
    return json.dumps(skills, ensure_ascii=False)

def normalize_skills_json(raw: Optional[str]) -> str:
    return encode_skills(parse_skills(raw))

def default_image_url(role: str) -> str:
    return f"/public/images/default-{role}.png"

def image_url_for(user: User) -> str:
    if user.image_data:
        return f"/api/images/{user.role}/{user.id}"
    return default_image_url(user.role)

def skills_for(user: User) -> List[str]:
    if user.role != UserRole.MENTOR.value:
        return []
    return parse_skills(user.skills)

def validate_image(content: bytes, content_type: Optional[str], max_size: int) -> None:
    """Accepts PNG or JPEG uploads whose declared type, size and magic bytes agree."""
    if content_type not in BusinessRules.ALLOWED_IMAGE_TYPES:
        raise InvalidImageError(ErrorMessages.IMAGE_TYPE_NOT_ALLOWED)
    if not content:
        raise InvalidImageError(ErrorMessages.NO_IMAGE)
    if len(content) > max_size:
        raise InvalidImageError(ErrorMessages.IMAGE_TOO_LARGE)
    if not (content.startswith(BusinessRules.PNG_SIGNATURE) or content.startswith(BusinessRules.JPEG_SIGNATURE)):
        raise InvalidImageError(ErrorMessages.INVALID_IMAGE_FORMAT)
