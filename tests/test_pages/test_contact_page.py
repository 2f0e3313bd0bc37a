"""Tests for ContactPage against mocked Playwright objects (no browser)."""

from unittest.mock import MagicMock

import pytest

from vectra_e2e.exceptions.custom import PageVerificationError, PhoneNumberNotFoundError
from vectra_e2e.pages.contact_page import SEL_CONTACT_CARDS, ContactPage

CONTACT_URL = "https://www.vectra.pl/kontakt"
CARD_SELECTOR = '#card-number-2:has(a[href="tel:+48600500400"])'
LINK_SELECTOR = 'a.button.btn-outlined[href="tel:+48600500400"]'


def _make_page(url=CONTACT_URL):
    locators: dict[str, MagicMock] = {}
    page = MagicMock()
    page.url = url
    page.locator.side_effect = lambda selector, **kwargs: locators.setdefault(
        selector, MagicMock(name=selector)
    )
    return page, locators


@pytest.fixture
def page_and_locators():
    return _make_page()


@pytest.fixture
def contact(page_and_locators, settings):
    page, _ = page_and_locators
    return ContactPage(page, settings)


def test_url_and_selectors(contact, page_and_locators):
    page, locators = page_and_locators

    assert contact.url == CONTACT_URL
    assert CARD_SELECTOR in locators
    assert LINK_SELECTOR in locators
    page.locator.assert_any_call("h1", has_text="Kontakt z firmą Vectra")


def test_expected_phone_normalized_from_settings(monkeypatch, tmp_path):
    from vectra_e2e.config import Settings

    monkeypatch.setenv("VECTRA_CUSTOMER_SERVICE_PHONE", "+48 600 500 400")
    page, locators = _make_page()
    contact = ContactPage(page, Settings(_env_file=None, snapshots_dir=tmp_path))

    assert contact.expected_phone == "600500400"
    assert LINK_SELECTOR in locators


# --- Loading ---


def test_verify_loaded_on_contact_page(contact, page_and_locators):
    page, locators = page_and_locators
    contact.verify_loaded()

    page.goto.assert_not_called()
    page.wait_for_url.assert_called_once_with(CONTACT_URL, timeout=15_000)
    locators[CARD_SELECTOR].wait_for.assert_called_once_with(state="visible", timeout=10_000)
    locators[CARD_SELECTOR].focus.assert_called_once()


def test_verify_loaded_navigates_after_drift(settings):
    page, _ = _make_page(url="https://www.vectra.pl/")
    contact = ContactPage(page, settings)

    contact.verify_loaded()

    page.goto.assert_called_once_with(CONTACT_URL)


# --- Header ---


def test_verify_page_header(contact, page_and_locators):
    page, locators = page_and_locators
    locators["h1"].text_content.return_value = "Kontakt z firmą Vectra"

    contact.verify_page_header("Kontakt z firmą Vectra")

    assert page.screenshot.call_args.kwargs["path"].endswith("krok_6_naglowek_kontakt.png")


def test_verify_page_header_mismatch(contact, page_and_locators):
    _, locators = page_and_locators
    locators["h1"].text_content.return_value = "Kontakt"

    with pytest.raises(PageVerificationError):
        contact.verify_page_header("Kontakt z firmą Vectra")


# --- Phone numbers ---


def test_find_and_verify_phone_numbers(contact, page_and_locators):
    _, locators = page_and_locators
    locators[SEL_CONTACT_CARDS].text_content.return_value = (
        "Obsługa Klienta +48&nbsp;600&nbsp;500&nbsp;400 Sprzedaż 500-600-700"
    )

    numbers = contact.find_and_verify_phone_numbers()

    assert numbers == {"600500400", "500600700"}


def test_expected_phone_missing_raises(contact, page_and_locators):
    page, locators = page_and_locators
    locators[SEL_CONTACT_CARDS].text_content.return_value = "Sprzedaż 500 600 700"

    with pytest.raises(PhoneNumberNotFoundError) as exc_info:
        contact.find_and_verify_phone_numbers()

    assert exc_info.value.expected == "600500400"
    page.screenshot.assert_not_called()


def test_empty_section_returns_empty_set(contact, page_and_locators):
    page, locators = page_and_locators
    locators[SEL_CONTACT_CARDS].text_content.return_value = None

    assert contact.find_and_verify_phone_numbers() == frozenset()
    assert page.screenshot.call_args.kwargs["path"].endswith(
        "krok_7_telefony_nie_znalezione_brak_tresci.png"
    )


def test_click_phone_number_link(contact, page_and_locators):
    _, locators = page_and_locators
    contact.click_phone_number_link()

    link = locators[LINK_SELECTOR]
    link.focus.assert_called_once()
    link.click.assert_called_once()


def test_navigate_snapshot_uses_page_name(settings):
    page, _ = _make_page(url="https://www.vectra.pl/")
    ContactPage(page, settings).navigate()

    assert page.screenshot.call_args.kwargs["path"].endswith("contact_page_loaded.png")
