from datetime import date as DateType
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints

from trainor.utils.taxonomy import FitnessLevel, PrimaryGoal

FullNameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]
UsernameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=50),
]


class Profile(BaseModel):
    """Row of the `profiles` table, one per auth user."""

    id: str
    email: EmailStr
    full_name: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    fitness_level: FitnessLevel = "beginner"
    primary_goal: PrimaryGoal = "strength"
    weight: float | None = None
    height: float | None = None
    date_of_birth: DateType | None = None

    created_at: datetime
    updated_at: datetime


class ProfileInsert(BaseModel):
    id: str
    email: EmailStr
    full_name: FullNameStr | None = None
    username: UsernameStr | None = None
    avatar_url: str | None = None
    fitness_level: FitnessLevel | None = None
    primary_goal: PrimaryGoal | None = None
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    date_of_birth: DateType | None = None


class ProfileUpdate(BaseModel):
    """
    Fields a user may change on their own profile.
    Identity columns (id, email) and timestamps are not editable here.
    """

    full_name: FullNameStr | None = None
    username: UsernameStr | None = None
    avatar_url: str | None = None
    fitness_level: FitnessLevel | None = None
    primary_goal: PrimaryGoal | None = None
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    date_of_birth: DateType | None = None

    def to_payload(self) -> dict:
        """Only the fields the caller actually set."""
        return self.model_dump(mode="json", exclude_unset=True)
