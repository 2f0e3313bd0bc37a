import logging
import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from vectra_e2e.exceptions.custom import NoValidPricesError
from vectra_e2e.schemas.extraction import PriceSummary

logger = logging.getLogger(__name__)

# Fraction limited to two digits: "49,9912" must read as 49.99
_PRICE_RE = re.compile(r"\d+(?:[.,]\d{1,2})?", re.ASCII)
_NBSP_RE = re.compile(r"&nbsp;|\xa0")


def normalize_spaces(text: str) -> str:
    return _NBSP_RE.sub(" ", text)


def parse_price(text: str | None) -> Decimal | None:
    """Return the first price found in ``text`` or None when nothing parses."""
    if not text:
        logger.warning("Price element has no text")
        return None

    match = _PRICE_RE.search(normalize_spaces(text))
    if not match:
        logger.warning("No price pattern found in text: %r", text)
        return None

    raw = match.group(0).replace(",", ".")
    try:
        return Decimal(raw)
    except InvalidOperation:
        logger.warning("Could not parse price from %r", raw)
        return None


def aggregate(texts: Iterable[str | None]) -> PriceSummary:
    prices: list[Decimal] = []
    for text in texts:
        price = parse_price(text)
        if price is None:
            continue
        logger.info("Found price: %s", price)
        prices.append(price)

    if not prices:
        raise NoValidPricesError("No valid prices to determine highest and lowest")

    return PriceSummary(highest=max(prices), lowest=min(prices), prices=prices)
