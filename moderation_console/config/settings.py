from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from moderation_console.config.credentials import DEFAULT_CREDENTIAL_POOL
from moderation_console.enums import BrowseMode
from moderation_console.schemas import Credential


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    app_env: str = Field(default="development", alias="APP_ENV")
    app_name: str = Field(default="moderation-console", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    server_host: str = Field(default="127.0.0.1", alias="SERVER_HOST")
    server_port: int = Field(default=8000, alias="SERVER_PORT")

    api_base_url: str = Field(default="http://localhost:8080/admin-api/v1", alias="API_BASE_URL")
    api_auth_header: str = Field(default="authcat", alias="API_AUTH_HEADER")
    api_timeout_seconds: float = Field(default=30.0, alias="API_TIMEOUT_SECONDS")

    page_size: int = Field(default=20, alias="PAGE_SIZE", ge=1)
    browse_mode: BrowseMode = Field(default=BrowseMode.SEQUENTIAL, alias="BROWSE_MODE")
    credentials: tuple[Credential, ...] = Field(default=DEFAULT_CREDENTIAL_POOL, alias="CONSOLE_CREDENTIALS")

    player_width: int = Field(default=375, alias="PLAYER_WIDTH")
    player_height: int = Field(default=667, alias="PLAYER_HEIGHT")

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
