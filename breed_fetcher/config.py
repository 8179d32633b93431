from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # Dog CEO API Settings
    dog_api_base_url: str = "https://dog.ceo/api"
    request_timeout: float = 10.0  # seconds

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BREED_FETCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


settings = Settings()
