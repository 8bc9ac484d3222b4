# app/core/config.py
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from the process and optionally from a local .env file
    model_config = SettingsConfigDict(
        env_file=(".env",),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="myeca_calculators", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # Tax rules
    DEFAULT_ASSESSMENT_YEAR: str = Field(
        default="2025-26",
        validation_alias=AliasChoices("DEFAULT_ASSESSMENT_YEAR", "default_assessment_year"),
    )

    # Tax-forms backend (external REST API)
    TAX_FORMS_API_BASE_URL: str = Field(
        default="",
        validation_alias=AliasChoices("TAX_FORMS_API_BASE_URL", "tax_forms_api_base_url"),
    )
    TAX_FORMS_API_TIMEOUT: float = Field(
        default=30.0,
        validation_alias=AliasChoices("TAX_FORMS_API_TIMEOUT", "tax_forms_api_timeout"),
    )

    # Web
    CORS_ALLOW_ORIGINS: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5000", "http://localhost:5173"],
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "cors_allow_origins"),
    )


settings = Settings()
