from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from apartment.models.base import Base, TimestampMixin


class InteriorType(Base, TimestampMixin):
    __tablename__ = "interior_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(String(50), unique=True)  # e.g. "sofa"
    name: Mapped[str] = mapped_column(String(100))

    patterns: Mapped[list["InteriorPattern"]] = relationship(
        back_populates="type", order_by="InteriorPattern.pattern_number"
    )


class InteriorPattern(Base, TimestampMixin):
    __tablename__ = "interior_patterns"
    __table_args__ = (UniqueConstraint("type_id", "pattern_number", name="uq_pattern_type_number"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    type_id: Mapped[int] = mapped_column(ForeignKey("interior_types.id"))
    pattern_number: Mapped[int] = mapped_column()
    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text)

    type: Mapped["InteriorType"] = relationship(back_populates="patterns")


class Interior(Base, TimestampMixin):
    """A pattern applied to a room. One row per (room, type), kept by the update path."""

    __tablename__ = "interiors"

    id: Mapped[int] = mapped_column(primary_key=True)
    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id", ondelete="CASCADE"))
    pattern_id: Mapped[int] = mapped_column(ForeignKey("interior_patterns.id"))

    room: Mapped["Room"] = relationship(back_populates="interiors")  # noqa: F821
    pattern: Mapped["InteriorPattern"] = relationship()
