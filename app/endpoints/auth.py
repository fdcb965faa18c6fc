from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import UnauthorizedException
from app.crud.user import user as crud_user
from app.models.user import User as UserModel
from app.schemas.response import APIResponse
from app.schemas.token import ChangePasswordRequest, LoginRequest, LoginResponse, RegisterResponse
from app.schemas.user import User, UserCreate
from app.services.auth import auth_service
from app.utils import deps

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
def login_for_access_token(
    request: LoginRequest,
    db: Session = Depends(deps.get_db)
):
    """Exchange email and password for a bearer token."""
    return auth_service.login(db=db, email=request.email, password=request.password)

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCreate,
    current_user: Optional[UserModel] = Depends(deps.get_optional_user)
):
    """Create an account. Open only until the first (tutor) account exists."""
    if current_user is None and crud_user.has_any(db):
        raise UnauthorizedException("No token provided")
    new_user = auth_service.register(db=db, user_in=user_in)
    return RegisterResponse(message="User registered successfully", user=User.model_validate(new_user))

@router.post("/logout", response_model=APIResponse[None])
def logout(
    db: Session = Depends(deps.get_db),
    token: str = Depends(deps.get_bearer_token)
):
    """Invalidate the current access token by adding it to the denylist."""
    auth_service.logout(db=db, token=token)
    return APIResponse(message="Logout successful")

@router.get("/me", response_model=User)
def read_current_user(current_user: UserModel = Depends(deps.get_current_user)):
    return User.model_validate(current_user)

@router.put("/change-password", response_model=APIResponse[None])
def change_password(
    *,
    db: Session = Depends(deps.get_db),
    request: ChangePasswordRequest,
    current_user: UserModel = Depends(deps.get_current_user)
):
    auth_service.change_password(
        db=db,
        user=current_user,
        current_password=request.current_password,
        new_password=request.new_password
    )
    return APIResponse(message="Password changed successfully")
