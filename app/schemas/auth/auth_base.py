from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class EnterRequest(BaseModel):
    student_id: str = Field(..., min_length=1, max_length=32)
    password: Optional[str] = Field(None, min_length=4, max_length=72)

    @field_validator("student_id")
    @classmethod
    def strip_student_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("student_id must not be blank")
        return value


class PasswordUpdate(BaseModel):
    password: str = Field(..., min_length=4, max_length=72)


class UserOut(BaseModel):
    id: int
    student_id: str
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True


class MeOut(BaseModel):
    user: UserOut
    has_profile: bool


class EnterResponse(MeOut):
    token: str
    token_type: str = "bearer"
    is_new_user: bool
