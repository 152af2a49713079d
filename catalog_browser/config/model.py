from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

DEFAULT_UI_TITLE = "Product Categories"
DEFAULT_SUBTITLE = "Interactive Product Catalog"
DEFAULT_RECORDS_DIR = "records"

USERS_FILE = "users.json"
CATEGORIES_FILE = "categories.json"
PRODUCTS_FILE = "products.json"


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    records_dir is always absolute: relative values are resolved against the
    config root when loading.
    """
    ui_title: str
    subtitle: str
    records_dir: Path

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], root: Path) -> GlobalConfig:
        records_path = Path(raw.get("records_dir", DEFAULT_RECORDS_DIR))
        if not records_path.is_absolute():
            records_path = (root / records_path).resolve()

        return cls(
            ui_title=raw.get("ui_title", DEFAULT_UI_TITLE),
            subtitle=raw.get("subtitle", DEFAULT_SUBTITLE),
            records_dir=records_path,
        )
