"""
User schemas.

A single user collection holds every persona; ``role`` is the
discriminant and the clinical fields (specialty, license, department)
are only filled for staff.
"""

from typing import Literal, Optional

from pydantic import Field

from neudebri.schemas.base import CamelModel

UserRole = Literal["patient", "doctor", "nurse", "admin"]


class UserBase(CamelModel):
    """Fields shared by every user representation except the password."""

    username: str = Field(..., min_length=1)
    email: str
    first_name: str
    last_name: str
    role: UserRole
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    avatar_url: Optional[str] = None
    # Staff only
    specialty: Optional[str] = None
    license_number: Optional[str] = None
    department: Optional[str] = None
    is_active: bool = True


class UserCreate(UserBase):
    """Registration payload."""

    password: str = Field(..., min_length=1)


class UserPublic(UserBase):
    """User as returned by the API; never carries the password."""

    id: str


class User(UserPublic):
    """Stored user record."""

    password: str

    def to_public(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password"}))


class LoginRequest(CamelModel):
    username: str
    password: str


class AuthResponse(CamelModel):
    user: UserPublic
