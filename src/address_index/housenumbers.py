from __future__ import annotations

from typing import Mapping

# processed in this order; a later field overwrites an identical number
HOUSENUMBER_KEYS = ("housenumber", "streetnumber", "conscriptionnumber")


def split_housenumbers(raw: str | None) -> list[str]:
    """Split a `;`-delimited house number string into trimmed, non-empty parts.

    Args:
        raw: House number string such as `"12;12A;14"`. May be `None`.

    Returns:
        House numbers in source order; an empty list for empty input.
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(";") if part.strip()]


def housenumbers_from_address(address: Mapping[str, str] | None) -> list[str]:
    """Collect house numbers from the address fields that may carry them.

    All of `housenumber`, `streetnumber` and `conscriptionnumber` contribute;
    they are merged, not treated as alternatives.
    """
    if address is None:
        return []

    numbers: list[str] = []
    for key in HOUSENUMBER_KEYS:
        numbers.extend(split_housenumbers(address.get(key)))
    return numbers
