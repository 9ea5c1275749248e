import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UserType(StrEnum):
    WORKER = "worker"
    EMPLOYER = "employer"
    ADMIN = "admin"


class User(BaseModel):
    # Accepts both snake_case and the camelCase used by the REST API
    model_config = {"frozen": True, "from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    email: str
    first_name: str
    last_name: str
    phone_number: str = ""
    location: str = ""
    user_type: UserType = UserType.WORKER
    profile_picture: str = ""
    bio: str = ""
    skills: list[str] = Field(default_factory=list)
    is_verified: bool = False
    rating: float = 0.0
    total_ratings: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
