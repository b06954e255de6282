"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    Game balance constants are fixed in the core and are not configurable here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Terminal shell keeps logs quiet so they don't interleave with the story
    CLI_LOG_LEVEL: str = "WARNING"

    GAME_TITLE: str = "The Dragon's Quest"


settings = Settings()
