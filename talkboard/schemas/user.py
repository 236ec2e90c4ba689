from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    id: int
    username: str = Field(min_length=1, max_length=50)
    # Blank keeps the current password
    password: Optional[str] = None


class UserOut(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)
