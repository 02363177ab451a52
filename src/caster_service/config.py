"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "caster-service"

    # CORS
    cors_origins: list[str] = ["*"]

    # Alexa skill identity (empty disables the application id check)
    application_id: str = ""

    # IFTTT Maker webhook trigger
    trigger_scheme: str = "http"
    trigger_host: str = "maker.ifttt.com"
    trigger_event: str = "caster"
    trigger_key: str = ""  # Webhook key from the IFTTT Maker settings page
    trigger_timeout: float = 10.0

    class Config:
        env_prefix = "CASTER_"
        case_sensitive = False

    @property
    def trigger_url(self) -> str:
        """Full webhook URL for the configured event and key."""
        return (
            f"{self.trigger_scheme}://{self.trigger_host}"
            f"/trigger/{self.trigger_event}/with/key/{self.trigger_key}"
        )


settings = Settings()
