from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserBase(BaseModel):
    """
    Basic user schema.
    """

    email: str = Field(min_length=3, max_length=200)
    name: str = Field(min_length=1, max_length=200)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserIn(UserBase):
    """
    Schema for creating a user.
    """

    external_id: str | None = None
    is_admin: bool = False


class UserOut(UserBase):
    """
    Schema for reading/returning User data.
    """

    id: int
    external_id: str | None = None
    is_admin: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class MicrosoftLoginIn(BaseModel):
    """
    Profile handed over by the browser once the Microsoft
    login flow is done.
    """

    microsoft_id: str = Field(min_length=1, alias="microsoftId")
    email: str = Field(min_length=3, max_length=200)
    name: str = Field(min_length=1, max_length=200)

    model_config = ConfigDict(populate_by_name=True)


class LoginOut(BaseModel):
    user: UserOut
    token: str
