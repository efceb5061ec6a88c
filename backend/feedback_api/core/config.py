
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices

class Settings(BaseSettings):
    app_name: str = Field(
        default="customer-feedback-api", validation_alias=AliasChoices("APP_NAME", "app_name")
    )
    environment: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))


    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "host"))
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "port"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))


    # "presence" accepts any bearer token; "introspection" asks an external endpoint
    auth_validator: str = Field(
        default="presence", validation_alias=AliasChoices("AUTH_VALIDATOR", "auth_validator")
    )
    auth_introspection_url: str = Field(
        default="", validation_alias=AliasChoices("AUTH_INTROSPECTION_URL", "auth_introspection_url")
    )
    auth_introspection_timeout: float = Field(
        default=5.0, validation_alias=AliasChoices("AUTH_INTROSPECTION_TIMEOUT", "auth_introspection_timeout")
    )


    cors_origins: str = Field(default="*", validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins"))

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

settings = Settings()
