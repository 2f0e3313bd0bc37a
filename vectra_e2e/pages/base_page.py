import logging
from pathlib import Path

from playwright.sync_api import Locator, Page

from vectra_e2e.config import Settings

logger = logging.getLogger(__name__)


class BasePage:
    name = "page"
    navigation_snapshot: str | None = None

    def __init__(self, page: Page, settings: Settings, url: str):
        self.page = page
        self.settings = settings
        self.url = url

    def is_current(self) -> bool:
        return self.page.url.rstrip("/") == self.url.rstrip("/")

    def navigate(self) -> None:
        logger.info("Navigating to %s: %s", self.name, self.url)
        self.page.goto(self.url)
        self.page.wait_for_load_state("load", timeout=self.settings.load_timeout_ms)
        logger.info("Navigated to %s and page reached 'load' state", self.url)
        self.snapshot(self.navigation_snapshot or f"{self.name}_loaded.png")

    def open(self) -> None:
        self.navigate()

    def ensure_on_page(self) -> None:
        """Re-open the page when the browser drifted to another URL."""
        if self.is_current():
            return
        logger.warning(
            "Current URL %s is not the %s URL, navigating to %s",
            self.page.url, self.name, self.url,
        )
        self.open()

    def snapshot(
        self, filename: str, locator: Locator | None = None, full_page: bool = False
    ) -> Path:
        snapshots_dir = self.settings.snapshots_dir
        snapshots_dir.mkdir(parents=True, exist_ok=True)
        path = snapshots_dir / filename
        if locator is not None:
            locator.screenshot(path=str(path))
        else:
            self.page.screenshot(path=str(path), full_page=full_page)
        logger.info("Screenshot saved: %s", path)
        return path
