import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from jose import JWTError
from pydantic import ValidationError

from app.core.exceptions import BadRequestException, ConflictException, UnauthorizedException
from app.core.security import create_access_token, decode_access_token, get_password_hash, verify_password
from app.crud.user import user as crud_user
from app.crud.token_denylist import token_denylist as crud_token_denylist
from app.models.user import User
from app.schemas.token import LoginResponse, TokenPayload
from app.schemas.user import User as UserSchema, UserCreate
from app.utils.validation import require_fields

logger = logging.getLogger(__name__)

class AuthService:
    def login(self, db: Session, *, email: str, password: str) -> LoginResponse:
        require_fields("Email and password are required", email=email, password=password)
        user = crud_user.get_by_email(db, email=email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise UnauthorizedException("Invalid credentials")

        access_token = create_access_token(data={"user_id": user.id}, email=user.email)
        return LoginResponse(
            message="Login successful",
            token=access_token,
            user=UserSchema.model_validate(user)
        )

    def decode_token(self, db: Session, *, token: str) -> TokenPayload:
        try:
            token_data = TokenPayload(**decode_access_token(token))
        except (JWTError, ValidationError):
            raise UnauthorizedException("Invalid token")

        if token_data.user_id is None:
            raise UnauthorizedException("Invalid token")
        if token_data.jti and crud_token_denylist.get_by_jti(db, jti=token_data.jti):
            raise UnauthorizedException("Token has been revoked")
        return token_data

    def verify(self, db: Session, *, token: str) -> User:
        """Resolve a bearer token to its user or fail with 401."""
        token_data = self.decode_token(db, token=token)
        user = crud_user.get(db, id=token_data.user_id)
        if not user:
            raise UnauthorizedException("Invalid token")
        return user

    def logout(self, db: Session, *, token: str) -> None:
        token_data = self.decode_token(db, token=token)
        if not token_data.jti or not token_data.exp:
            raise BadRequestException("Token missing JTI or expiration claim")

        now = datetime.now(timezone.utc)
        crud_token_denylist.purge_expired(db, now=now)
        crud_token_denylist.create(
            db,
            obj_in={"jti": token_data.jti, "exp": datetime.fromtimestamp(token_data.exp, tz=timezone.utc)}
        )

    def register(self, db: Session, *, user_in: UserCreate) -> User:
        require_fields(
            "Name, email, and password are required",
            name=user_in.name, email=user_in.email, password=user_in.password
        )
        if crud_user.get_by_email(db, email=user_in.email):
            raise ConflictException("User with this email already exists")

        data = user_in.model_dump(exclude={"password"}, exclude_none=True)
        data["password_hash"] = get_password_hash(user_in.password)
        new_user = crud_user.create(db, obj_in=data)
        logger.info(f"Registered user {new_user.id}")
        return new_user

    def change_password(self, db: Session, *, user: User, current_password: str, new_password: str) -> None:
        require_fields("Missing required fields", currentPassword=current_password, newPassword=new_password)
        if not verify_password(current_password, user.password_hash):
            raise UnauthorizedException("Current password is incorrect")
        crud_user.set_password_hash(db, db_obj=user, password_hash=get_password_hash(new_password))
        logger.info(f"Password changed for user {user.id}")

auth_service = AuthService()
