from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from vectra_e2e.mappers.phone_extractor import is_valid_phone, normalize_phone


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    vectra_base_url: str = "https://www.vectra.pl"
    vectra_customer_service_phone: str
    headless: bool = False
    slow_mo_ms: int = 750
    snapshots_dir: Path = Path("snapshots")
    artifacts_dir: Path = Path("test-results")
    record_video: bool = True
    trace: bool = True
    load_timeout_ms: int = 30_000
    visibility_timeout_ms: int = 10_000
    cookie_timeout_ms: int = 5_000
    url_wait_timeout_ms: int = 15_000
    log_level: str = "INFO"

    @field_validator("vectra_customer_service_phone")
    @classmethod
    def _normalize_phone(cls, value: str) -> str:
        number = normalize_phone(value)
        if not is_valid_phone(number):
            raise ValueError(
                f"customer service phone must have 9 digits (optionally +48), got {value!r}"
            )
        return number

    @property
    def contact_url(self) -> str:
        return f"{self.vectra_base_url.rstrip('/')}/kontakt"
