from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from apartment.models.base import Base, TimestampMixin


class Room(Base, TimestampMixin):
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(primary_key=True)
    room_number: Mapped[str] = mapped_column(String(4), unique=True)
    room_name: Mapped[str | None] = mapped_column(String(100))
    room_alias_id: Mapped[str] = mapped_column(String(128), unique=True)  # in-world client token
    login_id: Mapped[str] = mapped_column(String(128), unique=True)  # dashboard token
    is_occupied: Mapped[bool] = mapped_column(Boolean, default=False, server_default="0")

    interiors: Mapped[list["Interior"]] = relationship(back_populates="room", cascade="all, delete-orphan")  # noqa: F821
    playlists: Mapped[list["Playlist"]] = relationship(  # noqa: F821
        back_populates="room", cascade="all, delete-orphan", order_by="Playlist.id"
    )
