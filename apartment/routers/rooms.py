from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.database import get_session
from apartment.schemas.base import SuccessOut
from apartment.schemas.room import (
    ClaimOut,
    InteriorsUpdate,
    PlaylistsUpdate,
    RoomDetailOut,
    RoomListOut,
    RoomNameOut,
    RoomNameUpdate,
)
from apartment.viewmodels.room_vm import RoomActions, RoomDetailViewModel, RoomListViewModel

router = APIRouter(prefix="/api/rooms", tags=["rooms"])
playlist_router = APIRouter(prefix="/api", tags=["playlists"])


@router.get("", response_model=RoomListOut)
async def list_rooms(session: AsyncSession = Depends(get_session)):
    vm = await RoomListViewModel.load(session)
    return RoomListOut(rooms=vm.rooms)


@router.get("/by-login/{login_id}", response_model=RoomDetailOut)
async def get_room_by_login(login_id: str, session: AsyncSession = Depends(get_session)):
    vm = await RoomDetailViewModel.load_by_login(session, login_id)
    return RoomDetailOut.model_validate(vm.to_dict())


@router.get("/{room_alias_id}/claim", response_model=ClaimOut)
async def claim_room(room_alias_id: str, session: AsyncSession = Depends(get_session)):
    room, _ = await RoomActions.claim_room(session, room_alias_id)
    return ClaimOut(room_number=room.room_number, login_id=room.login_id)


@router.get("/{room_alias_id}", response_model=RoomDetailOut)
async def get_room(room_alias_id: str, session: AsyncSession = Depends(get_session)):
    vm = await RoomDetailViewModel.load_by_alias(session, room_alias_id)
    return RoomDetailOut.model_validate(vm.to_dict())


@router.post("/name", response_model=RoomNameOut)
async def update_room_name(data: RoomNameUpdate, session: AsyncSession = Depends(get_session)):
    room = await RoomActions.rename_room(session, data.login_id, data.room_name)
    return RoomNameOut(room_name=room.room_name)


@router.post("/interiors", response_model=SuccessOut)
async def update_interiors(data: InteriorsUpdate, session: AsyncSession = Depends(get_session)):
    await RoomActions.set_interiors(session, data.login_id, data.interiors)
    return SuccessOut()


@router.post("/playlists", response_model=SuccessOut)
async def update_playlists(data: PlaylistsUpdate, session: AsyncSession = Depends(get_session)):
    await RoomActions.set_playlists(session, data.login_id, data.playlists)
    return SuccessOut()


@playlist_router.get("/{room_alias_id}/playlist")
async def playlist_redirect(room_alias_id: str, index: int, session: AsyncSession = Depends(get_session)):
    url = await RoomActions.playlist_url(session, room_alias_id, index)
    return RedirectResponse(url, status_code=302)
