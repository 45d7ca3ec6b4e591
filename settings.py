from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Shuttlebot"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 2839
    log_level: str = "INFO"
    # Upper bound on a urlencoded request body; larger bodies are a form parse error
    max_form_bytes: int = 10 * 1024 * 1024


def get_settings() -> Settings:
    return Settings()
