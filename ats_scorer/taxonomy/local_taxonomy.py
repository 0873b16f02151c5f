from __future__ import annotations

import json
from pathlib import Path

from .models import Taxonomy

DEFAULT_TAXONOMY_PATH = Path(__file__).with_name("taxonomy.json")


def load_taxonomy(path: str | Path | None = None) -> Taxonomy:
    taxonomy_path = Path(path) if path else DEFAULT_TAXONOMY_PATH
    try:
        with taxonomy_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except OSError as exc:
        raise RuntimeError(f"Failed to read taxonomy '{taxonomy_path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Invalid JSON in taxonomy '{taxonomy_path}': {exc}") from exc

    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid taxonomy '{taxonomy_path}': expected a top-level object.")
    return Taxonomy.from_mapping(raw)
