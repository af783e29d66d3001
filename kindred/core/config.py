from typing import List, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_ENV: str = "dev"
    API_VERSION: str = "v1.0.0"
    DATABASE_URL: str = "sqlite:///./kindred.db"
    LOG_LEVEL: str = "INFO"

    JWT_ISSUER: str = "kindred"
    JWT_AUDIENCE: str = "kindred-app"
    JWT_ACCESS_TTL_SECONDS: int = 7 * 24 * 3600
    JWT_SECRET: str = "change_me_super_secret"

    # Translation of chat turns when the client locale is not BASE_LANGUAGE
    BASE_LANGUAGE: str = "en"
    TRANSLATE_ENABLED: bool = True
    TRANSLATE_BASE_URL: str = "https://translate.googleapis.com/translate_a/single"
    TRANSLATE_TIMEOUT_SECONDS: int = 10

    # Crisis escalation contacts, as (name, phone). Env value is JSON, e.g.
    # CRISIS_HOTLINES='[["AASRA", "9820 466 726"]]'
    CRISIS_HOTLINES: List[Tuple[str, str]] = [
        ("Vandrevala Foundation", "9999 666 555"),
        ("AASRA", "9820 466 726"),
    ]
    EMERGENCY_NUMBER: str = "112"

    ALLOW_DEV_DEBUG_META: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
