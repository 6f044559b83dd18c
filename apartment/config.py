from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.apartment"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "VRC Apartment Server"
    banner: str = "VRC Apartment Server API by aki_lua87"
    debug: bool = False
    database_url: str = "sqlite+aiosqlite:///data/apartment.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # the room whose login token doubles as the admin credential
    admin_room_number: str = "0000"
    admin_room_name: str = "Administrator"

    # interior slots seeded into a room when it is claimed
    default_interior_slots: list[str] = ["sofa", "table", "bed", "chair", "lamp", "carpet"]
    default_pattern_number: int = 1

    # dashboards send at most this many playlist URLs
    max_playlist_entries: int = 10

    seed_room_count: int = 100
    token_bytes: int = 32

    model_config = {
        "env_prefix": "APARTMENT_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        if self.database_url == type(self).model_fields["database_url"].default:
            self.database_url = _env_vars.get("DATABASE_URL", self.database_url)


settings = Settings()
