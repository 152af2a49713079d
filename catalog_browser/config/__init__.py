"""
Config package for catalog_browser.

Responsible for:
- config models (GlobalConfig)
- config and record I/O helpers (load_global_config / load_record_store / load_catalog)
"""

from .model import GlobalConfig
from .io import load_global_config, load_record_store, load_catalog

__all__ = ["GlobalConfig", "load_global_config", "load_record_store", "load_catalog"]
