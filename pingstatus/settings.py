from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings, read from `PINGSTATUS_*` environment variables.
    """

    # Prefix the environment variable not to mix up with other variables
    # used by the OS or other software.
    model_config = SettingsConfigDict(env_prefix="pingstatus_")

    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    celery_broker: str = "redis://redis:6379/0"
    frequency: int = 5  # minutes between two runs
    services_file: Path = Path("services.json")
    status_file: Path = Path("docs/statuses.json")


settings = Settings()
