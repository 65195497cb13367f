"""
models/views.py
---------------
Response models exposed over HTTP. Each view is a filtered projection of a
domain model: internal fields such as `Employment.user_id` never leave the
service.
"""

from pydantic import BaseModel, ConfigDict, Field

from models.employment import Employment
from models.user import User


class UserView(BaseModel):
    """Public shape of a user."""
    id: int
    name: str

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(id=user.id, name=user.name)


class EmploymentView(BaseModel):
    """Public shape of an employment, serialized as `employmentNumber`."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    employment_number: int = Field(alias="employmentNumber")

    @classmethod
    def from_employment(cls, employment: Employment) -> "EmploymentView":
        return cls(id=employment.id, employment_number=employment.employment_number)


class UserWithEmployments(BaseModel):
    """A user together with every employment that references it."""
    user: UserView
    employments: list[EmploymentView]
