from pydantic import BaseModel

from farmwork.models.user import User


class LoginCredentials(BaseModel):
    email: str = ""
    password: str = ""


class RegisterData(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    phone_number: str = ""
    location: str = ""
    user_type: str = ""
    bio: str | None = None
    skills: list[str] | None = None


class AuthResult(BaseModel):
    user: User
    token: str
    refresh_token: str | None = None


class ProfileUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    location: str | None = None
    bio: str | None = None
    skills: list[str] | None = None
    profile_picture: str | None = None
