from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Telegram Bot
    telegram_bot_token: str
    telegram_webhook_secret: str | None = None  # Checked against X-Telegram-Bot-Api-Secret-Token

    # API
    public_base_url: str = ""  # Webhook registration is skipped when empty
    api_port: int = 8000  # uvicorn port for `python -m apps.api.main`

    # Web App advertised in /start and /webchat
    web_app_url: str = "https://boredmonkeychats.web.app/"

    # Logging
    log_level: str = "INFO"

    # Environment
    environment: str = "development"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def webhook_url(self) -> str | None:
        if not self.public_base_url:
            return None
        return f"{self.public_base_url.rstrip('/')}/telegram/webhook"


settings = Settings()
