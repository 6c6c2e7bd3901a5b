from agent.tools.catalog import (
    CatalogStore,
    FAQEntry,
    Product,
    ProductNotFound,
    default_catalog,
    load_catalog,
)

__all__ = [
    "CatalogStore",
    "FAQEntry",
    "Product",
    "ProductNotFound",
    "default_catalog",
    "load_catalog",
]
