from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from loguru import logger
from passlib.context import CryptContext
from sqlmodel import Session, select, func

from football_backend.core.config import settings
from football_backend.core.database import get_session
from football_backend.core.errors import AdminExists, InvalidCredentials
from football_backend.models.admin_model import Admin, AdminRegister, AdminLogin, TokenResponse

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def create_access_token(username: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "iat": now,
        "exp": now + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def resolve_admin(token: Optional[str], session: Session) -> Admin:
    """Resolves a Bearer token to an Admin or raises 401."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise credentials_exception

    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise credentials_exception

    username = payload.get("sub")
    if not username:
        raise credentials_exception

    admin = session.exec(select(Admin).where(Admin.username == username)).first()
    if not admin:
        raise credentials_exception
    return admin


def get_current_admin(token: str = Depends(oauth2_scheme), session: Session = Depends(get_session)) -> Admin:
    return resolve_admin(token, session)


# === REGISTER ===

@router.post("/register", status_code=201)
def register_admin(
    data: AdminRegister,
    session: Session = Depends(get_session),
    token: Optional[str] = Depends(optional_oauth2_scheme),
):
    """
    Registers an administrator.
    The very first admin can register freely; after that an admin token is required.
    """
    admin_count = session.exec(select(func.count()).select_from(Admin)).one()
    if admin_count > 0:
        resolve_admin(token, session)

    existing = session.exec(select(Admin).where(Admin.username == data.username)).first()
    if existing:
        raise AdminExists()

    hashed = pwd_context.hash(data.password)
    new_admin = Admin(username=data.username, password_hash=hashed)
    session.add(new_admin)
    session.commit()

    logger.info(f"Admin registered: {data.username}")
    return {"message": "Admin registered"}


# === LOGIN ===

@router.post("/login", response_model=TokenResponse)
def login_admin(data: AdminLogin, session: Session = Depends(get_session)):
    admin = session.exec(select(Admin).where(Admin.username == data.username)).first()
    if not admin:
        raise InvalidCredentials()

    if not pwd_context.verify(data.password, admin.password_hash):
        raise InvalidCredentials()

    return TokenResponse(
        access_token=create_access_token(admin.username),
        expires_in=settings.access_token_expire_minutes * 60,
    )
