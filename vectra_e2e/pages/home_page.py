import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from vectra_e2e.config import Settings
from vectra_e2e.exceptions.custom import NoValidPricesError, PageVerificationError
from vectra_e2e.mappers.price_aggregator import aggregate
from vectra_e2e.pages.base_page import BasePage
from vectra_e2e.schemas.extraction import PriceSummary

logger = logging.getLogger(__name__)

SEL_ACCEPT_COOKIES = "//*[normalize-space(text())='Akceptuj wszystkie']"
SEL_COOKIES_BANNER = "//*[@id='cookiescript_injected_wrapper']"
SEL_OFFERS_CONTAINER = "//div[contains(@class, 'mainPrice')]"
SEL_PRICE = ".mainPrice"
SEL_INTERNET_MENU_ITEM = (
    "//span[normalize-space(text())='Internet' and contains(@class, 'firstMenuItem')]"
)
SEL_ZERO_LEVEL_MENU_ITEMS = (
    '//li[contains(@class, "menu-level-one-item")]/a/span[contains(@class, "firstMenuItem")]'
)
SEL_KONTAKT_LINK = (
    "//span[normalize-space(text())='Kontakt' and contains(@class, 'firstMenuItem')]"
)


class HomePage(BasePage):
    name = "home_page"
    navigation_snapshot = "krok_1_nawigacja.png"

    def __init__(self, page: Page, settings: Settings):
        super().__init__(page, settings, settings.vectra_base_url)
        self.accept_cookies_button = page.locator(SEL_ACCEPT_COOKIES)
        self.cookies_banner = page.locator(SEL_COOKIES_BANNER)
        self.offers_container = page.locator(SEL_OFFERS_CONTAINER)
        self.prices = page.locator(SEL_PRICE)
        self.internet_menu_item = page.locator(SEL_INTERNET_MENU_ITEM)
        self.zero_level_menu_items = page.locator(SEL_ZERO_LEVEL_MENU_ITEMS)
        self.kontakt_link = page.locator(SEL_KONTAKT_LINK)

    def open(self) -> None:
        self.navigate()
        self.accept_cookies()

    def accept_cookies(self) -> None:
        """Accept the cookie banner if it shows up; a missing banner is fine."""
        timeout = self.settings.cookie_timeout_ms
        logger.info("Trying to accept cookies")
        try:
            self.cookies_banner.wait_for(state="visible", timeout=timeout)
            logger.info("Cookie consent banner is visible")

            self.accept_cookies_button.wait_for(state="visible", timeout=timeout)
            self.accept_cookies_button.scroll_into_view_if_needed()
            self.accept_cookies_button.focus()
            self.snapshot("cookies_accept_button_focused.png", self.accept_cookies_button)

            self.accept_cookies_button.click(timeout=timeout)
            logger.info("'Akceptuj wszystkie' clicked")

            self.cookies_banner.wait_for(
                state="hidden", timeout=self.settings.visibility_timeout_ms
            )
            logger.info("Cookie consent banner disappeared")
            self.snapshot("cookies_accepted.png")
        except PlaywrightTimeoutError:
            logger.info(
                "Cookie banner or accept button did not show up in time; "
                "assuming cookies are already accepted"
            )
        except PlaywrightError as exc:
            logger.warning("Unexpected error while accepting cookies: %s", exc.message)
            self.snapshot("cookie_acceptance_error_debug.png", full_page=True)

    def log_highest_and_lowest_prices(self) -> PriceSummary:
        logger.info("Looking for the highest and lowest internet offer prices")
        self.offers_container.first.wait_for(
            state="visible", timeout=self.settings.visibility_timeout_ms
        )

        elements = self.prices.all()
        if not elements:
            logger.warning("No elements with class 'mainPrice' found")
            raise NoValidPricesError("No price elements found on the page")

        summary = aggregate(element.text_content() for element in elements)

        logger.info("All prices found: [%s]", ", ".join(str(p) for p in summary.prices))
        logger.info("Highest price: %s", summary.highest)
        logger.info("Lowest price: %s", summary.lowest)
        self.snapshot("krok_2_ceny_ofert_zaladowane.png")
        return summary

    def verify_internet_menu_item_is_unique(self) -> None:
        count = self.internet_menu_item.count()
        if count != 1:
            raise PageVerificationError(
                f"Expected exactly 1 'Internet' item in the zero-level menu, found {count}",
                page_name=self.name,
            )
        logger.info("Exactly 1 'Internet' item found in the zero-level menu")
        self.internet_menu_item.focus()
        self.snapshot("krok_3_internet_menu_focused.png", self.internet_menu_item)
        self.snapshot("krok_3_internet_menu_verified.png")

    def verify_last_menu_item_text(self, expected: str) -> None:
        logger.info("Checking that the last zero-level menu item is '%s'", expected)
        items = self.zero_level_menu_items.all()
        if not items:
            raise PageVerificationError(
                "No items found in the zero-level menu", page_name=self.name
            )

        last_item = items[-1]
        actual = (last_item.text_content() or "").strip()
        if actual != expected:
            raise PageVerificationError(
                f"Last zero-level menu item is '{actual}', expected '{expected}'",
                page_name=self.name,
            )
        logger.info("Last zero-level menu item is '%s'", actual)
        last_item.focus()
        self.snapshot("krok_4_ostatni_menu_item_focused.png", last_item)
        self.snapshot("krok_4_ostatni_menu_item_verified.png")

    def click_kontakt_link(self) -> None:
        self.kontakt_link.wait_for(
            state="visible", timeout=self.settings.visibility_timeout_ms
        )
        self.kontakt_link.focus()
        self.snapshot("krok_5_kontakt_link_focused.png", self.kontakt_link)
        self.kontakt_link.click()
        logger.info("'Kontakt' link clicked")
        self.snapshot("krok_5_kontakt_link_clicked.png")
