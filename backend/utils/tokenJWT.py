# utils/tokenJWT.py
# Signing of the session record kept client-side. The record carries no
# expiry claim: a session lasts until logout.
from typing import Optional
from jose import jwt, JWTError

from config import settings


def encode_session_record(record: dict) -> str:
    return jwt.encode(dict(record), settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_record(token: str) -> Optional[dict]:
    # Tampered or foreign values read as "no session"
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
