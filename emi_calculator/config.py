import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "EMI_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Dashboard
    dashboard_port: int = 8050

    # Display
    currency_symbol: str = "₹"
    default_rows_per_page: int = 10
    rows_per_page_options: list[int] = [10, 50, 100, 200]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for CLI / server entry points."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
