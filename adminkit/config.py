from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Orbitools AdminKit"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Settings storage
    settings_file: str = "data/adminkit_settings.json"

    # Admin page
    page_slug: str = "orbitools"
    option_name: str = "settings"

    model_config = SettingsConfigDict(
        env_prefix="ADMINKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
