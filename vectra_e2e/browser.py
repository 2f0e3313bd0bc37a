import logging
from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Page, sync_playwright

from vectra_e2e.config import Settings

logger = logging.getLogger(__name__)


def launch_options(settings: Settings) -> dict:
    return {"headless": settings.headless, "slow_mo": settings.slow_mo_ms}


def context_options(settings: Settings) -> dict:
    options: dict = {"no_viewport": True}
    if settings.record_video:
        options["record_video_dir"] = str(settings.artifacts_dir / "videos")
    return options


@contextmanager
def open_page(settings: Settings) -> Iterator[Page]:
    """Yield a fresh Chromium page; tracing and video follow ``settings``."""
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(**launch_options(settings))
        context = browser.new_context(**context_options(settings))
        if settings.trace:
            context.tracing.start(screenshots=True, snapshots=True, sources=True)
        logger.info("Browser started (headless=%s)", settings.headless)
        try:
            yield context.new_page()
        finally:
            if settings.trace:
                trace_path = settings.artifacts_dir / "trace.zip"
                context.tracing.stop(path=str(trace_path))
                logger.info("Trace saved to %s", trace_path)
            context.close()
            browser.close()
            logger.info("Browser closed")
