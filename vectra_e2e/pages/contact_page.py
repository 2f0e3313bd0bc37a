import logging

from playwright.sync_api import Page

from vectra_e2e.config import Settings
from vectra_e2e.exceptions.custom import PageVerificationError, PhoneNumberNotFoundError
from vectra_e2e.mappers.phone_extractor import contains, extract, format_phone, normalize_phone
from vectra_e2e.pages.base_page import BasePage

logger = logging.getLogger(__name__)

SEL_CONTACT_CARDS = 'section[data-widget="(/kontakt) - formy kontaktu - boksy"]'
HEADER_TEXT = "Kontakt z firmą Vectra"


class ContactPage(BasePage):
    name = "contact_page"

    def __init__(self, page: Page, settings: Settings):
        super().__init__(page, settings, settings.contact_url)
        self.expected_phone = normalize_phone(settings.vectra_customer_service_phone)
        tel_href = f"tel:+48{self.expected_phone}"

        self.page_header = page.locator("h1", has_text=HEADER_TEXT)
        self.contact_cards_section = page.locator(SEL_CONTACT_CARDS)
        self.customer_service_card = page.locator(
            f'#card-number-2:has(a[href="{tel_href}"])'
        )
        self.customer_service_link = page.locator(
            f'a.button.btn-outlined[href="{tel_href}"]'
        )

    def verify_loaded(self) -> None:
        self.ensure_on_page()

        self.page.wait_for_url(self.url, timeout=self.settings.url_wait_timeout_ms)
        logger.info("Contact page URL confirmed: %s", self.url)
        self.page.wait_for_load_state("load", timeout=self.settings.load_timeout_ms)

        self.customer_service_card.wait_for(
            state="visible", timeout=self.settings.visibility_timeout_ms
        )
        logger.info("Customer service phone card is visible")
        self.customer_service_card.focus()
        self.snapshot(
            "krok_5_1_kontakt_page_loaded_and_card_focused.png",
            self.customer_service_card,
        )
        self.snapshot("krok_5_2_kontakt_page_loaded_full.png")

    def verify_page_header(self, expected: str) -> None:
        self.page_header.wait_for(
            state="visible", timeout=self.settings.visibility_timeout_ms
        )
        self.page_header.focus()
        self.snapshot("krok_6_naglowek_kontakt_focused.png", self.page_header)

        actual = (self.page_header.text_content() or "").strip()
        if actual != expected:
            raise PageVerificationError(
                f"Contact page header is '{actual}', expected '{expected}'",
                page_name=self.name,
            )
        logger.info("Contact page header is '%s'", expected)
        self.snapshot("krok_6_naglowek_kontakt.png")

    def find_and_verify_phone_numbers(self) -> frozenset[str]:
        """Log every phone number on the contact cards and require the expected one.

        An empty cards section is only reported and yields an empty set.
        """
        self.contact_cards_section.wait_for(
            state="visible", timeout=self.settings.visibility_timeout_ms
        )
        content = self.contact_cards_section.text_content()
        if not content:
            logger.warning("Contact cards section has no text to extract phone numbers from")
            self.snapshot("krok_7_telefony_nie_znalezione_brak_tresci.png")
            return frozenset()

        numbers = extract(content)
        if numbers:
            logger.info(
                "Unique 9-digit phone numbers on the page: %s", ", ".join(sorted(numbers))
            )
        else:
            logger.info("No 9-digit phone numbers found on the page")

        if not contains(numbers, self.expected_phone):
            logger.error("Expected phone number '%s' NOT found on the page", self.expected_phone)
            raise PhoneNumberNotFoundError(self.expected_phone, page_name=self.name)

        logger.info("Expected phone number '%s' found on the page", self.expected_phone)
        self.snapshot("krok_7_telefony_znalezione_i_zweryfikowane.png")
        return numbers

    def click_phone_number_link(self) -> None:
        link_text = format_phone(self.expected_phone)
        self.customer_service_link.wait_for(
            state="visible", timeout=self.settings.visibility_timeout_ms
        )
        logger.info("Customer service phone link '%s' is visible", link_text)
        self.customer_service_link.focus()
        self.snapshot("krok_7_telefon_kontaktowy_link_focused.png", self.customer_service_link)
        self.customer_service_link.click()
        logger.info("Clicked customer service phone link '%s'", link_text)
        self.snapshot("krok_7_telefon_kontaktowy_link_clicked.png")
