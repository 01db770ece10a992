# backend/models/setting.py
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.orm import Session
from database import Base
from config import settings

# Key/value configuration stored alongside the data (e.g. currency)
class Setting(Base):
    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


DEFAULT_SETTINGS = {"currency": settings.DEFAULT_CURRENCY}


def seed_default_settings(db: Session):
    # Insert missing keys only, existing values are kept
    for key, value in DEFAULT_SETTINGS.items():
        if db.get(Setting, key) is None:
            db.add(Setting(key=key, value=value))
    db.commit()


def get_setting(db: Session, key: str, default: str = None) -> str:
    row = db.get(Setting, key)
    return row.value if row else default
