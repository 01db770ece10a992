# backend/routes/auth.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from schemas import user as schemas
from utils.access import visible_navigation
from utils.session import SessionStore, get_session

router = APIRouter(tags=["Auth"])

APP_NAME = "Gents by Elegante"
LOGIN_ERROR = "Invalid username or password"


# Login page model; tells the client whether a session already exists
@router.get("/login")
def login_page(session: SessionStore = Depends(get_session)):
    return {"app": APP_NAME, "authenticated": session.is_authenticated}


# Authenticate through the auth service and store the session record
@router.post("/login", response_model=schemas.MeResponse)
def login(payload: schemas.UserLogin, session: SessionStore = Depends(get_session)):
    if not session.login(payload.username, payload.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=LOGIN_ERROR)
    return {"user": session.user, "navigation": visible_navigation(session.user.role)}


@router.post("/logout")
def logout(session: SessionStore = Depends(get_session)):
    session.logout()
    return {"message": "Logged out"}


# Current session user together with the menu entries the role may see
@router.get("/me", response_model=schemas.MeResponse)
def me(session: SessionStore = Depends(get_session)):
    if not session.is_authenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return {"user": session.user, "navigation": visible_navigation(session.user.role)}


@router.get("/navigation", response_model=List[schemas.NavigationItem])
def navigation(session: SessionStore = Depends(get_session)):
    if not session.is_authenticated:
        return []
    return visible_navigation(session.user.role)
