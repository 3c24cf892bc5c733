# mentor_match/routers/auth_router.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import SignupRequest, SignupResponse, LoginRequest, Token
from ..services import UserService
from ..dependencies.service_dependencies import get_user_service
from ..security import authenticate_user, create_token_for_user
from ..constants import ErrorMessages, SuccessMessages
from ..exceptions import BusinessLogicError

router = APIRouter(prefix="/api", tags=["authentication"])

@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(
    user: SignupRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Register a new mentor or mentee"""
    try:
        db_user = user_service.create_user(user)
        return SignupResponse(message=SuccessMessages.USER_CREATED, userId=db_user.id)
    except BusinessLogicError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.post("/login", response_model=Token)
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ErrorMessages.INVALID_CREDENTIALS)
    return Token(token=create_token_for_user(user))
