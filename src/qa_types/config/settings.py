from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, strip_trailing_slash

class Settings(BaseSettings):
    """
    Settings shared by the examples, loaded from the environment and `.env`.

    Every example reads only the group it needs; nothing here couples one example to another.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Database (integration example)
    DATABASE_URL: str = "sqlite+aiosqlite:///./qa_types.db"
    SQLALCHEMY_ECHO: bool = False
    SEED_DEMO_DATA: bool = True

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("logs/qa_types")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # Login demo application (functional example)
    LOGIN_BASE_URL: str = "http://127.0.0.1:8000"
    LOGIN_USERNAME: str = "tomsmith"
    LOGIN_PASSWORD: SecretStr = SecretStr("SuperSecretPassword!")

    # Browser automation
    BROWSER: Literal["chrome", "firefox"] = "chrome"
    HEADLESS: bool = True
    REMOTE_WEBDRIVER_URL: str | None = None
    BROWSER_TIMEOUT: float = 10.0
    RUN_BROWSER_TESTS: bool = False

    # Performance example
    PERF_THRESHOLD_SECONDS: float = 0.5

    # OWASP ZAP (security example)
    ZAP_API_KEY: SecretStr | None = None
    ZAP_PROXY_URL: str = "http://127.0.0.1:8080"
    ZAP_TARGET_URL: str = "http://127.0.0.1:8000"
    ZAP_POLL_INTERVAL: float = 2.0
    ZAP_TIMEOUT: float = 600.0
    RUN_ZAP_TESTS: bool = False

    # --- Derived settings ---
    @property
    def login_url(self) -> str:
        """Absolute URL of the login form served by the demo application."""
        return f"{self.LOGIN_BASE_URL}/login"

    @property
    def zap_proxies(self) -> dict[str, str]:
        """
        Proxy mapping in the shape `zapv2.ZAPv2(proxies=...)` expects.
        ZAP listens for both schemes on the same address.
        """
        return {"http": self.ZAP_PROXY_URL, "https": self.ZAP_PROXY_URL}

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_LEVEL environment variable value to uppercase.

        The logging module expects level names in uppercase ("DEBUG", "INFO"), while
        people commonly write `LOG_LEVEL=debug` in their `.env` files.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", "BROWSER", mode="before")
    def normalize_choice(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    @field_validator("LOGIN_BASE_URL", "ZAP_PROXY_URL", "ZAP_TARGET_URL", "REMOTE_WEBDRIVER_URL", mode="before")
    def normalize_url(cls, v: str | None) -> str | None:
        return strip_trailing_slash(v)

    @field_validator("BROWSER_TIMEOUT", "ZAP_POLL_INTERVAL", "ZAP_TIMEOUT", "PERF_THRESHOLD_SECONDS")
    def positive_seconds(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be a positive number of seconds")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# get_settings() takes no arguments and always returns the same settings from the environment,
# so it is cached; tests call get_settings.cache_clear() after changing environment variables.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
