from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from catalog_browser.config.model import GlobalConfig
from catalog_browser.core.catalog import Catalog


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config root, global config and the loaded
    Catalog. Passed into layout + callback registration functions instead of
    using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    catalog: Optional[Catalog] = None

    def validate(self) -> None:
        """Ensure the catalog is attached before the app starts."""
        if self.catalog is None:
            raise RuntimeError("AppConfig.catalog must be initialized.")
