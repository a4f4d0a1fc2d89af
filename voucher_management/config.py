"""Settings read from the environment."""
from dataclasses import dataclass
import os


@dataclass
class Settings:
    min_amount: float
    host: str
    port: int
    log_level: str


def load_settings() -> Settings:
    return Settings(
        min_amount=float(os.getenv("VOUCHER_MIN_AMOUNT", "100")),
        host=os.getenv("VOUCHER_HOST", "127.0.0.1"),
        port=int(os.getenv("VOUCHER_PORT", "8000")),
        log_level=os.getenv("VOUCHER_LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
