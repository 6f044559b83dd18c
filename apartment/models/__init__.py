from apartment.models.base import Base
from apartment.models.interior import Interior, InteriorPattern, InteriorType
from apartment.models.playlist import Playlist
from apartment.models.room import Room

__all__ = ["Base", "Interior", "InteriorPattern", "InteriorType", "Playlist", "Room"]
