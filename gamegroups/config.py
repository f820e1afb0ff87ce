"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Game group contract settings loaded from environment variables."""

    # Reject requests where minPlayers > maxPlayers (off by default)
    enforce_player_order: bool = False

    # Logging
    log_level: str = "INFO"

    # CORS (comma-separated extra origins, in addition to localhost defaults)
    cors_origins: str = ""

    model_config = {
        "env_prefix": "GAMEGROUPS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Singleton instance
settings = Settings()
