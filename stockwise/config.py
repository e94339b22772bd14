# stockwise/config.py
import os


class Settings:
    """
    Very simple settings holder.
    Reads everything from environment variables, falling back to a
    local sqlite file and console-only logging.
    """

    def __init__(self) -> None:
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./stockwise.db")
        self.sql_echo: bool = os.getenv("STOCKWISE_SQL_ECHO", "false").lower() == "true"
        self.log_level: str = os.getenv("STOCKWISE_LOG_LEVEL", "INFO").upper()
        self.log_file: str | None = os.getenv("STOCKWISE_LOG_FILE") or None
        self.seed_demo_data: bool = (
            os.getenv("STOCKWISE_SEED_DEMO_DATA", "true").lower() == "true"
        )


settings = Settings()
