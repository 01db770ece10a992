# backend/schemas/user.py
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List, Optional
from models.users import Role

# Credentials posted by the login form
class UserLogin(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

# Record kept in the client-side session: identity and role, never the password
class SessionUser(BaseModel):
    id: int
    username: str
    role: Role

# Schema for creating a user through the auth service
class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=6)
    role: Role = Role.SALES_STAFF

# Output schema for the users page
class UserResponse(BaseModel):
    id: int
    username: str
    role: Role
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class NavigationItem(BaseModel):
    name: str
    href: str

class MeResponse(BaseModel):
    user: SessionUser
    navigation: List[NavigationItem]

class UsersPage(BaseModel):
    items: List[UserResponse]
    total: int
