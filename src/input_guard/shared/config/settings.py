from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Input Guard API", validation_alias=AliasChoices("APP_NAME"))
    app_version: str = Field(default="0.1.0", validation_alias=AliasChoices("APP_VERSION"))
    app_env: str = Field(default="local", validation_alias=AliasChoices("APP_ENV"))
    app_debug: bool = Field(default=False, validation_alias=AliasChoices("APP_DEBUG", "DEBUG"))
    api_host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("API_HOST"))
    api_port: int = Field(default=8000, validation_alias=AliasChoices("API_PORT"))
    cors_allowed_origins: str = Field(
        default="",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS"),
    )

    max_input_length: int = Field(
        default=10_000,
        gt=0,
        validation_alias=AliasChoices("MAX_INPUT_LENGTH"),
    )
    max_request_body_bytes: int = Field(
        default=1_048_576,
        gt=0,
        validation_alias=AliasChoices("MAX_REQUEST_BODY_BYTES"),
    )

    email_min_length: int = Field(default=5, validation_alias=AliasChoices("EMAIL_MIN_LENGTH"))
    email_max_length: int = Field(default=64, validation_alias=AliasChoices("EMAIL_MAX_LENGTH"))
    username_min_length: int = Field(default=5, validation_alias=AliasChoices("USERNAME_MIN_LENGTH"))
    username_max_length: int = Field(default=32, validation_alias=AliasChoices("USERNAME_MAX_LENGTH"))
    password_min_length: int = Field(default=8, validation_alias=AliasChoices("PASSWORD_MIN_LENGTH"))
    password_max_length: int = Field(
        default=128,
        validation_alias=AliasChoices("PASSWORD_MAX_LENGTH"),
    )
    url_max_length: int = Field(default=2048, validation_alias=AliasChoices("URL_MAX_LENGTH"))
    url_allowed_domains: str = Field(
        default="",
        validation_alias=AliasChoices("URL_ALLOWED_DOMAINS"),
    )
    non_empty_max_depth: int = Field(
        default=10,
        validation_alias=AliasChoices("NON_EMPTY_MAX_DEPTH"),
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        return _split_csv(self.cors_allowed_origins)

    @property
    def url_allowed_domains_list(self) -> list[str]:
        return _split_csv(self.url_allowed_domains)


def _split_csv(raw: str) -> list[str]:
    return [value.strip() for value in raw.split(",") if value.strip()]


settings = Settings()
