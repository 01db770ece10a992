# backend/models/users.py
from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from database import Base
import enum

# Closed set of roles; page access is derived from it in utils/access.py
class Role(str, enum.Enum):
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    SALES_STAFF = "sales_staff"

# Represents a user account with a bcrypt password hash and system role
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    role = Column(
        Enum(Role, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Role.SALES_STAFF,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
