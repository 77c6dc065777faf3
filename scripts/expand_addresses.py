import logging
from pathlib import Path

from address_index.io_utils import load_address_records, save_documents
from address_index.pipeline import expand_records
from address_index.settings import load_settings


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    settings, paths = load_settings()
    records = load_address_records(Path(paths.data_dir) / "addresses.jsonl")
    documents = expand_records(records, settings)
    save_documents(documents, Path(paths.artifacts_dir) / "documents.jsonl")
    print({"records": len(records), "documents": len(documents)})
