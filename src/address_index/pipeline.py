from __future__ import annotations

import logging
from typing import Iterable

from .linear_ref import GeometryError
from .records import RecordError, document_from_record, interpolation_from_record
from .result import AddressResult
from .schema import AddressDocument
from .settings import ExpansionSettings

logger = logging.getLogger(__name__)


def build_result(record: dict, settings: ExpansionSettings | None = None) -> AddressResult:
    """Collect every house number a raw record carries onto its base document.

    Args:
        record: Raw address record.
        settings: Expansion limits; defaults apply when omitted.

    Returns:
        The populated result, ready for `docs_with_housenumber`.

    Raises:
        RecordError: If the record cannot be turned into a base document.
        GeometryError: If the record's interpolation line is degenerate.
    """
    settings = settings or ExpansionSettings()
    base_doc = document_from_record(record)

    result = AddressResult(base_doc, max_interpolation_width=settings.max_interpolation_width)
    result.add_housenumbers_from_string(base_doc.housenumber)
    result.add_housenumbers_from_address(base_doc.address)
    result.add_interpolation(interpolation_from_record(record))
    return result


def expand_record(record: dict, settings: ExpansionSettings | None = None) -> list[AddressDocument]:
    """Turn one raw record into the documents to index for it.

    Returns:
        One document per house number, the base document alone when there
        are none, or an empty list when the record is not worth indexing.
    """
    result = build_result(record, settings)
    if not result.is_useful_for_index():
        return []
    return result.docs_with_housenumber()


def expand_records(
    records: Iterable[dict],
    settings: ExpansionSettings | None = None,
) -> list[AddressDocument]:
    """Expand a batch of raw records, skipping records that cannot be used.

    Records with missing fields or a degenerate interpolation line are logged
    and dropped; every other error propagates.
    """
    documents: list[AddressDocument] = []
    skipped = 0
    for record in records:
        try:
            documents.extend(expand_record(record, settings))
        except (RecordError, GeometryError) as exc:
            skipped += 1
            logger.warning("Skipping record %s: %s", record.get("place_id"), exc)

    if skipped:
        logger.info("Expanded records into %d documents, %d records skipped", len(documents), skipped)
    return documents
