"""Typed client for the apartment API plus small observable state holders.

The stores mirror what a dashboard keeps around: who is logged in, and the
current room as last returned by the server. Subscribers are called with the
new state every time it changes.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

import httpx

from apartment.config import settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApartmentClient:
    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None, timeout: float = 10):
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ApartmentClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, body: dict | None = None) -> Any:
        resp = await self._client.request(method, f"/api{path}", json=body)
        if resp.is_error:
            try:
                message = resp.json().get("error")
            except ValueError:
                message = None
            raise ApiError(message or f"API request failed with status {resp.status_code}", resp.status_code)
        if resp.status_code == 204:
            return None
        return resp.json()

    # auth
    async def auth_login(self, login_id: str) -> dict:
        return await self._request("POST", "/auth/login", {"loginId": login_id})

    async def admin_login(self, login_id: str) -> dict:
        return await self._request("POST", "/auth/admin-login", {"loginId": login_id})

    # rooms
    async def get_rooms(self) -> dict:
        return await self._request("GET", "/rooms")

    async def claim_room(self, room_alias_id: str) -> dict:
        return await self._request("GET", f"/rooms/{room_alias_id}/claim")

    async def get_room(self, room_alias_id: str) -> dict:
        return await self._request("GET", f"/rooms/{room_alias_id}")

    async def get_room_by_login(self, login_id: str) -> dict:
        return await self._request("GET", f"/rooms/by-login/{login_id}")

    async def update_room_name(self, login_id: str, room_name: str) -> dict:
        return await self._request("POST", "/rooms/name", {"loginId": login_id, "roomName": room_name})

    async def update_interiors(self, login_id: str, interiors: list[dict]) -> dict:
        return await self._request("POST", "/rooms/interiors", {"loginId": login_id, "interiors": interiors})

    async def update_playlists(self, login_id: str, playlists: list[str]) -> dict:
        return await self._request("POST", "/rooms/playlists", {"loginId": login_id, "playlists": playlists})

    # interior catalog
    async def get_interior_types(self) -> dict:
        return await self._request("GET", "/interior-types")

    async def get_interior_patterns(self) -> dict:
        return await self._request("GET", "/interior-patterns")

    async def get_interior_combinations(self) -> dict:
        return await self._request("GET", "/interior-combinations")

    # admin
    async def add_interior_type(self, code: str, name: str) -> dict:
        return await self._request("POST", "/admin/interior-types", {"code": code, "name": name})

    async def update_interior_type(self, type_id: int, **data: str) -> dict:
        return await self._request("PUT", f"/admin/interior-types/{type_id}", data)

    async def delete_interior_type(self, type_id: int) -> dict:
        return await self._request("DELETE", f"/admin/interior-types/{type_id}")

    async def add_interior_pattern(self, type_id: int, name: str, description: str | None = None) -> dict:
        body = {"typeId": type_id, "name": name}
        if description is not None:
            body["description"] = description
        return await self._request("POST", "/admin/interior-patterns", body)

    async def update_interior_pattern(self, pattern_id: int, **data: str | None) -> dict:
        return await self._request("PUT", f"/admin/interior-patterns/{pattern_id}", data)

    async def delete_interior_pattern(self, pattern_id: int) -> dict:
        return await self._request("DELETE", f"/admin/interior-patterns/{pattern_id}")


S = TypeVar("S")


class Store(Generic[S]):
    """Holds one state value and notifies subscribers on every change."""

    def __init__(self, initial: S):
        self._state = initial
        self._subscribers: list[Callable[[S], None]] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, callback: Callable[[S], None]) -> Callable[[], None]:
        self._subscribers.append(callback)
        callback(self._state)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set(self, state: S) -> None:
        self._state = state
        for callback in list(self._subscribers):
            callback(state)

    def update(self, fn: Callable[[S], S]) -> None:
        self.set(fn(self._state))


@dataclass(frozen=True)
class AuthState:
    is_authenticated: bool = False
    is_admin: bool = False
    room_number: str | None = None
    room_name: str | None = None
    login_id: str | None = None
    is_loading: bool = False
    error: str | None = None


class AuthStore(Store[AuthState]):
    def __init__(self, client: ApartmentClient):
        super().__init__(AuthState())
        self.client = client

    async def login(self, login_id: str) -> bool:
        self.update(lambda s: replace(s, is_loading=True, error=None))
        try:
            result = await self.client.auth_login(login_id)
        except ApiError as e:
            self.set(AuthState(error=e.message))
            return False

        if not result["success"]:
            self.set(AuthState(error=result.get("message")))
            return False
        self.set(
            AuthState(
                is_authenticated=True,
                room_number=result.get("roomNumber"),
                room_name=result.get("roomName"),
                login_id=login_id,
            )
        )
        return True

    async def admin_login(self, login_id: str) -> bool:
        self.update(lambda s: replace(s, is_loading=True, error=None))
        try:
            result = await self.client.admin_login(login_id)
        except ApiError as e:
            self.set(AuthState(error=e.message))
            return False

        if not result["success"]:
            self.set(AuthState(error=result.get("message")))
            return False
        self.set(
            AuthState(
                is_authenticated=True,
                is_admin=True,
                room_number=settings.admin_room_number,
                room_name=settings.admin_room_name,
                login_id=login_id,
            )
        )
        return True

    def logout(self) -> None:
        self.set(AuthState())


@dataclass(frozen=True)
class RoomState:
    room: dict | None = None
    is_loading: bool = False
    error: str | None = None
    login_id: str | None = field(default=None, repr=False)


class RoomStore(Store[RoomState]):
    def __init__(self, client: ApartmentClient):
        super().__init__(RoomState())
        self.client = client

    async def load_by_login(self, login_id: str) -> None:
        self.update(lambda s: replace(s, is_loading=True, error=None, login_id=login_id))
        try:
            room = await self.client.get_room_by_login(login_id)
        except ApiError as e:
            logger.warning("Could not load room: %s", e.message)
            self.update(lambda s: replace(s, is_loading=False, error=e.message))
            return
        self.update(lambda s: replace(s, room=room, is_loading=False))

    async def _mutate(self, call) -> bool:
        login_id = self.state.login_id
        if not login_id:
            self.update(lambda s: replace(s, error="Not logged in"))
            return False
        try:
            await call(login_id)
        except ApiError as e:
            self.update(lambda s: replace(s, error=e.message))
            return False
        await self.load_by_login(login_id)
        return True

    async def rename(self, room_name: str) -> bool:
        return await self._mutate(lambda login_id: self.client.update_room_name(login_id, room_name))

    async def set_interiors(self, interiors: list[dict]) -> bool:
        return await self._mutate(lambda login_id: self.client.update_interiors(login_id, interiors))

    async def set_playlists(self, playlists: list[str]) -> bool:
        playlists = playlists[: settings.max_playlist_entries]
        return await self._mutate(lambda login_id: self.client.update_playlists(login_id, playlists))
