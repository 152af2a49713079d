

class CatalogBrowserError(Exception):
    """Base exception for all catalog_browser errors"""
    pass

class ConfigError(CatalogBrowserError):
    """Missing or invalid global.json, records directory or record file"""
    pass

class RecordSchemaError(CatalogBrowserError):
    """
    A raw record doesn't match what the Record Store expects:
    missing id/name/categoryId/ownerId keys, unknown sex code, etc
    """
    pass
