# mentor_match/routers/profile_router.py
from fastapi import APIRouter, Depends, File, HTTPException, Path, Response, UploadFile
from fastapi.responses import RedirectResponse

from ..config import get_settings
from ..services import UserService
from ..dependencies.service_dependencies import get_user_service
from ..schemas import ProfileUpdate, UserProfileResponse, MessageResponse, ImageUploadResponse
from ..models import User
from ..security import get_current_user
from ..constants import ErrorMessages, SuccessMessages
from ..exceptions import BusinessLogicError
from ..utils.profile_utils import default_image_url

router = APIRouter(prefix="/api", tags=["profiles"])
settings = get_settings()

@router.get("/me", response_model=UserProfileResponse)
async def read_me(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Get the current user's profile"""
    return user_service.get_profile(current_user)

@router.put("/me", response_model=MessageResponse)
async def update_me(
    profile_data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Update name, bio and (mentors only) skills"""
    try:
        user_service.update_profile(current_user, profile_data)
        return MessageResponse(message=SuccessMessages.PROFILE_UPDATED)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.post("/me/image", response_model=ImageUploadResponse)
async def upload_image(
    image: UploadFile | None = File(None, description="JPG or PNG, at most 1MB"),
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Upload a profile image"""
    if image is None:
        raise HTTPException(status_code=400, detail=ErrorMessages.NO_IMAGE)
    try:
        # Never buffer more than one byte past the size limit
        content = await image.read(settings.MAX_IMAGE_SIZE_BYTES + 1)
        image_url = user_service.update_image(current_user, content, image.content_type)
        return ImageUploadResponse(message=SuccessMessages.IMAGE_UPLOADED, imageUrl=image_url)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.get("/images/{role}/{user_id}", response_class=Response)
async def read_image(
    role: str = Path(..., description="mentor or mentee"),
    user_id: int = Path(..., description="The ID of the user"),
    user_service: UserService = Depends(get_user_service)
):
    """Serve a profile image, or redirect to the role's default image"""
    try:
        user = user_service.get_user_for_image(role, user_id)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    if not user.image_data:
        return RedirectResponse(url=default_image_url(role))
    return Response(content=user.image_data, media_type=user.image_type)
