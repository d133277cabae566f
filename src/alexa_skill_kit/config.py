"""Skill configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Skill settings loaded from environment variables."""

    # Application
    debug: bool = False
    service_name: str = "alexa-skill-kit"

    # Request verification
    application_id: str = ""  # amzn1.ask.skill.<id> of the skill this function serves
    ignore_application_id: bool = False  # Local testing only
    ignore_timestamp: bool = False
    timestamp_tolerance: int = 150  # Seconds between request timestamp and now

    class Config:
        env_prefix = "ALEXA_SKILL_"
        case_sensitive = False


settings = Settings()
