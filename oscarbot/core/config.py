from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Oscar"
    app_env: str = "dev"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE")

    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    github_user_agent: str = Field(default="oscarbot", alias="GITHUB_USER_AGENT")
    github_timeout_seconds: float = Field(default=10.0, alias="GITHUB_TIMEOUT_SECONDS")
    github_max_attempts: int = Field(default=1, alias="GITHUB_MAX_ATTEMPTS")
    github_token_scopes: list[str] = Field(default_factory=lambda: ["public_repo"], alias="GITHUB_TOKEN_SCOPES")
    github_token_note: str = Field(default="oscarbot star", alias="GITHUB_TOKEN_NOTE")

    handler_timeout_seconds: float = Field(default=25.0, alias="HANDLER_TIMEOUT_SECONDS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
