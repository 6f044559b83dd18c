from pydantic import Field

from apartment.schemas.base import CamelModel


class LoginRequest(CamelModel):
    login_id: str = Field(min_length=1)


class LoginOut(CamelModel):
    success: bool
    room_number: str | None = None
    room_name: str | None = None
    message: str


class AdminLoginOut(CamelModel):
    success: bool
    message: str
