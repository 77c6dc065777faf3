from __future__ import annotations

import json
from pathlib import Path

from .schema import AddressDocument, Point


def _load_jsonl(path: str | Path) -> list[dict]:
    records: list[dict] = []
    with Path(path).open("r", encoding="utf-8") as file_handle:
        for line in file_handle:
            if line.strip():
                records.append(json.loads(line))
    return records


def load_address_records(path: str | Path = "data/addresses.jsonl") -> list[dict]:
    return _load_jsonl(path)


def save_documents(documents: list[AddressDocument], path: str | Path) -> None:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)

    with destination.open("w", encoding="utf-8") as file_handle:
        for document in documents:
            file_handle.write(json.dumps(document.to_dict(), ensure_ascii=False) + "\n")


def load_documents(path: str | Path) -> list[AddressDocument]:
    documents: list[AddressDocument] = []
    for record in _load_jsonl(path):
        record["centroid"] = Point(**record["centroid"])
        documents.append(AddressDocument(**record))
    return documents
