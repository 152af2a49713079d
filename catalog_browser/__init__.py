"""
Top-level package for the product catalog browser.

This package exposes the core architecture (records, views, filters, UI adapters).
Most code should import from submodules such as:
    catalog_browser.core
    catalog_browser.config
    catalog_browser.ui
"""

__all__: list[str] = []
