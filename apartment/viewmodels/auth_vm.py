import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from apartment.config import settings
from apartment.repositories.room_repo import RoomRepository

logger = logging.getLogger(__name__)


@dataclass
class LoginViewModel:
    success: bool
    message: str
    room_number: str | None = None
    room_name: str | None = None

    @classmethod
    async def login(cls, session: AsyncSession, login_id: str) -> "LoginViewModel":
        """Bare token check. A room that has not been claimed does not authenticate."""
        room = await RoomRepository(session).get_by_login(login_id)
        if not room:
            return cls(success=False, message="Invalid login ID")
        if not room.is_occupied:
            return cls(success=False, message="This room has not been claimed yet")
        return cls(
            success=True,
            message="Logged in",
            room_number=room.room_number,
            room_name=room.room_name,
        )

    @classmethod
    async def admin_login(cls, session: AsyncSession, login_id: str) -> "LoginViewModel":
        room = await RoomRepository(session).get_by_login(login_id)
        if not room or room.room_number != settings.admin_room_number:
            logger.warning("Rejected admin login attempt")
            return cls(success=False, message="Administrator access denied")
        return cls(success=True, message="Logged in as administrator", room_number=room.room_number)
