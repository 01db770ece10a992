# backend/routes/users.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from schemas.user import SessionUser, UserCreate, UserResponse, UsersPage
from utils.access import Page, require_page
from utils.auth_service import AuthServiceClient, AuthServiceError, get_auth_service

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.get("", response_model=UsersPage)
def users_page(
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.USERS)),
):
    users = []
    try:
        users = db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
    except SQLAlchemyError:
        logger.exception("Error fetching users")
    return {"items": users, "total": len(users)}


# Password hashing happens inside the auth service, never here
@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    payload: UserCreate,
    auth_service: AuthServiceClient = Depends(get_auth_service),
    current_user: SessionUser = Depends(require_page(Page.USERS)),
):
    try:
        result = auth_service.create_user(payload.username, payload.password, payload.role.value)
    except AuthServiceError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Authentication service unavailable")

    if not result.get("success"):
        logger.warning(f"Creating user '{payload.username}' failed: {result.get('error')}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.get("error") or "Could not create user")
    return result["user"]
