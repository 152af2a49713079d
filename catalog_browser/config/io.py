from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, TypeVar

from catalog_browser.config.model import (
    CATEGORIES_FILE,
    PRODUCTS_FILE,
    USERS_FILE,
    GlobalConfig,
)
from catalog_browser.core.catalog import Catalog
from catalog_browser.core.exceptions import ConfigError, RecordSchemaError
from catalog_browser.core.records import Category, Product, RecordStore, Sex, User

logger = logging.getLogger(__name__)

_R = TypeVar("_R")

_SEX_ALIASES = {
    "m": Sex.MALE,
    "male": Sex.MALE,
    "f": Sex.FEMALE,
    "female": Sex.FEMALE,
}


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError(f"File not found at {path}")
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            records/            (or whatever global.json's records_dir names)
                users.json
                categories.json
                products.json

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json does not exist or is not a JSON object.
    """
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    raw_global = _read_json(root / "global.json")
    if not isinstance(raw_global, dict):
        raise ConfigError(f"{root / 'global.json'} must contain a JSON object")

    return GlobalConfig.from_raw(raw_global, root)


# -----------------------------------------------------------------------------
# Raw record parsing
# -----------------------------------------------------------------------------
def _require(raw: Dict[str, Any], key: str, kind: str, index: int) -> Any:
    if key not in raw:
        raise RecordSchemaError(f"{kind} #{index} is missing required field '{key}'")
    return raw[key]


def parse_user(raw: Dict[str, Any], index: int = 0) -> User:
    sex_code = str(_require(raw, "sex", "User", index)).lower()
    sex = _SEX_ALIASES.get(sex_code)
    if sex is None:
        raise RecordSchemaError(f"User #{index} has unknown sex code '{raw['sex']}'")

    return User(
        id=int(_require(raw, "id", "User", index)),
        name=str(_require(raw, "name", "User", index)),
        sex=sex,
    )


def parse_category(raw: Dict[str, Any], index: int = 0) -> Category:
    return Category(
        id=int(_require(raw, "id", "Category", index)),
        title=str(_require(raw, "title", "Category", index)),
        icon=str(raw.get("icon", "")),
        owner_id=int(_require(raw, "ownerId", "Category", index)),
    )


def parse_product(raw: Dict[str, Any], index: int = 0) -> Product:
    return Product(
        id=int(_require(raw, "id", "Product", index)),
        name=str(_require(raw, "name", "Product", index)),
        category_id=int(_require(raw, "categoryId", "Product", index)),
    )


def _load_collection(path: Path, parse: Callable[[Dict[str, Any], int], _R]) -> Tuple[_R, ...]:
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ConfigError(f"{path} must contain a JSON array")

    records: List[_R] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise RecordSchemaError(f"{path.name} entry #{idx} is not an object")
        try:
            records.append(parse(item, idx))
        except RecordSchemaError:
            logger.error(
                "Invalid record",
                extra={"path": str(path), "index": idx},
            )
            raise
    return tuple(records)


def load_record_store(records_dir: Path) -> RecordStore:
    """
    Read users.json, categories.json and products.json into a RecordStore.

    References between collections are not checked here; dangling ones are
    resolved to None when views are built.
    """
    if not records_dir.is_dir():
        raise ConfigError(f"Records directory not found at {records_dir}")

    store = RecordStore(
        users=_load_collection(records_dir / USERS_FILE, parse_user),
        categories=_load_collection(records_dir / CATEGORIES_FILE, parse_category),
        products=_load_collection(records_dir / PRODUCTS_FILE, parse_product),
    )

    logger.info(
        "Record store loaded",
        extra={
            "records_dir": str(records_dir),
            "n_users": len(store.users),
            "n_categories": len(store.categories),
            "n_products": len(store.products),
        },
    )
    return store


def load_catalog(root: Path) -> Tuple[GlobalConfig, Catalog]:
    """
    Main entrypoint used by the UI: load global config, then the records it
    points at, and wrap them in a Catalog.

    :param root: config directory
    :return: A tuple of (GlobalConfig, Catalog).
    """
    global_config = load_global_config(root)
    store = load_record_store(global_config.records_dir)
    return global_config, Catalog(store, name=global_config.ui_title)
