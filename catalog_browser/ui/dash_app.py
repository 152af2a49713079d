from __future__ import annotations

import logging
import os
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from catalog_browser.config.io import load_catalog
from catalog_browser.ui.layout.build_layout import build_layout
from catalog_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from catalog_browser.ui.callbacks.callbacks_render import register_render_callbacks
from catalog_browser.ui.callbacks.callbacks_io import register_io_callbacks

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_ROOT = Path("config")


def create_dash_app(config_root: Path | str | None = None) -> Dash:
    if config_root is None:
        config_root = os.getenv("CATALOG_BROWSER_CONFIG_ROOT", str(DEFAULT_CONFIG_ROOT))
    config_root = Path(config_root)

    # 1) Load config + records (snapshot is fixed for the process lifetime)
    global_config, catalog = load_catalog(config_root)

    # 2) App context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=catalog,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_products": len(catalog.views)},
    )

    return app
