from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .interpolation import MAX_INTERPOLATION_WIDTH


@dataclass(slots=True)
class ExpansionSettings:
    """Limits applied while expanding records into documents."""

    max_interpolation_width: int = MAX_INTERPOLATION_WIDTH


@dataclass(slots=True)
class Paths:
    """Common project paths used by the expansion scripts."""

    data_dir: str = "data"
    artifacts_dir: str = "artifacts"


def load_settings() -> tuple[ExpansionSettings, Paths]:
    """Load environment-backed settings and return typed config objects.

    Returns:
        Tuple containing expansion settings and common path settings.
    """
    load_dotenv()
    return (
        ExpansionSettings(
            max_interpolation_width=int(
                os.getenv("ADDRESS_INDEX_MAX_INTERPOLATION_WIDTH", str(MAX_INTERPOLATION_WIDTH))
            ),
        ),
        Paths(
            data_dir=os.getenv("ADDRESS_INDEX_DATA_DIR", "data"),
            artifacts_dir=os.getenv("ADDRESS_INDEX_ARTIFACTS_DIR", "artifacts"),
        ),
    )
