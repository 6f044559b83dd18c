from typing import Any

from pydantic import Field

from apartment.schemas.base import CamelModel, SuccessOut


class RoomSummaryOut(CamelModel):
    room_number: str
    room_name: str | None
    is_occupied: bool


class RoomListOut(CamelModel):
    rooms: list[RoomSummaryOut] = []


class ClaimOut(SuccessOut):
    room_number: str
    login_id: str


class RoomInteriorOut(CamelModel):
    # left-joined, so a dangling assignment comes back with nulls
    type: str | None
    type_name: str | None
    pattern: int | None
    pattern_name: str | None


class RoomDetailOut(CamelModel):
    room_number: str
    room_name: str | None
    is_occupied: bool
    interiors: list[RoomInteriorOut] = []
    playlists: list[str] = []


class RoomNameUpdate(CamelModel):
    login_id: str = Field(min_length=1)
    room_name: str = Field(max_length=100)


class RoomNameOut(SuccessOut):
    room_name: str


class InteriorEntry(CamelModel):
    type: str = Field(min_length=1)
    pattern: int


class InteriorsUpdate(CamelModel):
    login_id: str = Field(min_length=1)
    # entries are validated one by one so a bad entry is skipped, not fatal
    interiors: list[Any]


class PlaylistsUpdate(CamelModel):
    login_id: str = Field(min_length=1)
    playlists: list[Any]
