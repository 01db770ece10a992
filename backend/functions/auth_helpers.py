# backend/functions/auth_helpers.py
# Standalone password service: hashing and verification never leave this
# app. Run it next to the web app, e.g.
#   uvicorn functions.auth_helpers:app --port 8001
import hmac
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi import APIRouter, Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

load_dotenv()

from config import settings
from database import get_db, init_db
from models.users import Role, User
from utils.hashing import BCRYPT_MAX_BYTES, get_password_hash, verify_password

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

router = APIRouter(prefix="/functions/v1", tags=["Auth helpers"])


class LoginRequest(BaseModel):
    username: str
    password: str


class CreateUserRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: Role

    # bcrypt limit is 72 bytes, not characters
    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _user_out(user: User) -> dict:
    return {"id": user.id, "username": user.username, "role": user.role.value}


def _create_user(db: Session, data: Dict[str, Any]) -> JSONResponse:
    req = CreateUserRequest.model_validate(data)
    user = User(username=req.username, password=get_password_hash(req.password), role=req.role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return _error(f"Username '{req.username}' already exists", 400)
    db.refresh(user)
    logger.info(f"User '{user.username}' created with role {user.role.value}")
    return JSONResponse({"success": True, "user": _user_out(user)})


def _login(db: Session, data: Dict[str, Any]) -> JSONResponse:
    req = LoginRequest.model_validate(data)
    user = db.query(User).filter(User.username == req.username).first()
    if not user:
        return _error("User not found", 401)
    if not verify_password(req.password, user.password):
        return _error("Invalid password", 401)
    return JSONResponse({"success": True, "user": _user_out(user)})


def _create_default_admin(db: Session) -> JSONResponse:
    username = settings.DEFAULT_ADMIN_USERNAME
    existing = db.query(User.id).filter(User.username == username).first()
    if existing:
        return JSONResponse({"success": True, "message": "Admin already exists"})

    admin = User(
        username=username,
        password=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
        role=Role.SUPER_ADMIN,
    )
    db.add(admin)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        return _error(str(e.orig), 400)
    logger.info(f"Default admin '{username}' created")
    return JSONResponse({"success": True, "message": "Admin created"})


def require_anon_key(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> bool:
    # An unset key never matches, so an unconfigured deployment rejects everything
    expected = settings.ELEGANTE_ANON_KEY
    if not expected or credentials is None:
        return False
    return hmac.compare_digest(credentials.credentials.encode("utf-8"), expected.encode("utf-8"))


@router.options("/auth-helpers")
def auth_helpers_preflight():
    return PlainTextResponse("ok")


@router.post("/auth-helpers")
def auth_helpers(
    payload: Dict[str, Any] = Body(...),
    authorized: bool = Depends(require_anon_key),
    db: Session = Depends(get_db),
):
    if not authorized:
        return _error("Unauthorized", 401)

    data = dict(payload)
    action = data.pop("action", None)
    try:
        if action == "create_user":
            return _create_user(db, data)
        if action == "login":
            return _login(db, data)
        if action == "create_default_admin":
            return _create_default_admin(db)
    except ValidationError as e:
        return _error(f"Invalid request: {e.errors()[0]['msg']}", 400)
    except Exception as e:
        logger.exception(f"auth-helpers action '{action}' failed")
        return _error(str(e), 500)

    return _error("Invalid action", 400)


init_db()

app = FastAPI(title="Gents by Elegante auth-helpers", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(router)
