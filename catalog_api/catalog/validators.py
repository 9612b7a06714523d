"""Request input validation for catalog queries.

Turns raw query/path strings into bounded values before any store access.
Both validators are total: bad input is normalized or rejected, never raised.
"""

import re
from decimal import Decimal, InvalidOperation

from catalog_api.catalog.repository import SearchFilters

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

PRODUCT_CODE_PATTERN = re.compile(r"PROD[0-9]{3}")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int(text: str) -> int | None:
    """Parse a base-10 integer the way strict parsers do.

    Accepts an optional sign followed by ASCII digits, within the signed
    64-bit range. No whitespace, underscores or non-ASCII digits.
    """
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def _parse_decimal(text: str) -> Decimal | None:
    """Parse an exact decimal from ASCII digits with optional fraction and exponent.

    Whitespace, underscores, non-ASCII digits and non-finite values are rejected.
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def validate_product_filters(
    offset: str | None,
    limit: str | None,
    price_less_than: str | None,
    category: str | None,
) -> SearchFilters:
    """Build search filters from raw query parameters.

    Out-of-range or unparseable values fall back to defaults:
    offset 0, limit 10, no price filter. Limits 1..100 pass through.

    Args:
        offset: Raw offset text.
        limit: Raw limit text.
        price_less_than: Raw price ceiling text.
        category: Category code, passed through when non-empty.

    Returns:
        SearchFilters within bounds.
    """
    filters = SearchFilters(offset=DEFAULT_OFFSET, limit=DEFAULT_LIMIT)

    if offset:
        parsed = _parse_int(offset)
        if parsed is not None and parsed >= 0:
            filters.offset = parsed

    if limit:
        parsed = _parse_int(limit)
        if parsed is not None and 0 < parsed <= MAX_LIMIT:
            filters.limit = parsed

    if price_less_than:
        price = _parse_decimal(price_less_than)
        if price is not None and price > 0:
            filters.price_less_than = price

    if category:
        filters.category = category

    return filters


def validate_product_code(code: str | None) -> bool:
    """Check that a product code is PROD followed by exactly 3 digits.

    Args:
        code: Product code from the request path.

    Returns:
        True if the code is well-formed.
    """
    if not code:
        return False
    return PRODUCT_CODE_PATTERN.fullmatch(code) is not None
