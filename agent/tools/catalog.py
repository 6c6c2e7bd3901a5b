from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


logger = logging.getLogger(__name__)


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float = Field(..., ge=0, description="Unit price in USD")
    description: str = ""
    tags: List[str] = Field(default_factory=list)


class FAQEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


class CatalogData(BaseModel):
    products: List[Product] = Field(default_factory=list)
    faqs: List[FAQEntry] = Field(default_factory=list)


class ProductNotFound(LookupError):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


DEFAULT_CATALOG: Dict[str, Any] = {
    "products": [
        {
            "id": "classic-lemonade",
            "name": "Classic Lemonade",
            "price": 4.99,
            "description": "Our bestseller, made with fresh lemons and cane sugar.",
            "tags": ["classic", "original", "bestseller"],
        },
        {
            "id": "sugar-free-lemonade",
            "name": "Sugar-Free Lemonade",
            "price": 5.49,
            "description": "Sweetened with stevia for zero sugar and full flavor.",
            "tags": ["sugar-free", "diet", "stevia"],
        },
        {
            "id": "strawberry-bliss",
            "name": "Strawberry Bliss Lemonade",
            "price": 5.99,
            "description": "Fresh strawberry puree mixed with our classic recipe.",
            "tags": ["strawberry", "berry", "fruity"],
        },
        {
            "id": "ginger-zing",
            "name": "Ginger Zing Lemonade",
            "price": 5.99,
            "description": "Fresh ginger blended into our lemonade for a nice kick.",
            "tags": ["ginger", "spicy"],
        },
        {
            "id": "lavender-dream",
            "name": "Lavender Dream Lemonade",
            "price": 6.49,
            "description": "Floral and refreshing, our most unique flavor.",
            "tags": ["lavender", "floral"],
        },
        {
            "id": "party-pack",
            "name": "Party Pack",
            "price": 27.99,
            "description": "Six bottles of your favorite flavors, perfect for groups.",
            "tags": ["bundle", "party", "gift"],
        },
    ],
    "faqs": [
        {
            "question": "How long does shipping take?",
            "answer": "We ship within 2-3 business days. Standard shipping takes 3-5 days.",
        },
        {
            "question": "What is your return policy?",
            "answer": "If you're not satisfied, contact us within 7 days for a full refund.",
        },
        {
            "question": "Are your lemonades vegan?",
            "answer": "Yes, all our lemonades are 100% vegan and plant-based.",
        },
    ],
}


class CatalogStore:
    """Read-only product and FAQ catalog."""

    def __init__(self, data: Union[CatalogData, Dict[str, Any]]) -> None:
        if not isinstance(data, CatalogData):
            data = CatalogData.model_validate(data)
        self._products = tuple(data.products)
        self._faqs = tuple(data.faqs)
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("Duplicate product ids in catalog")

    def all_products(self) -> List[Product]:
        return list(self._products)

    def product_by_id(self, product_id: str) -> Product:
        try:
            return self._by_id[product_id]
        except KeyError:
            raise ProductNotFound(product_id) from None

    def search(self, query: Optional[str] = None) -> List[Product]:
        if not query:
            return self.all_products()

        term = query.lower()
        return [
            p
            for p in self._products
            if term in p.name.lower()
            or term in p.description.lower()
            or any(term in tag.lower() for tag in p.tags)
        ]

    def all_faqs(self) -> List[FAQEntry]:
        return list(self._faqs)


def default_catalog() -> CatalogStore:
    return CatalogStore(DEFAULT_CATALOG)


def load_catalog(path: Optional[Union[str, Path]]) -> CatalogStore:
    """Load the catalog JSON at ``path``, falling back to the built-in data.

    A missing, unreadable or invalid file is logged and never raised.
    """
    if path is None:
        logger.warning("No catalog path configured, using default catalog")
        return default_catalog()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        store = CatalogStore(raw)
    except (OSError, json.JSONDecodeError, ValidationError, ValueError) as exc:
        logger.warning("Catalog load failed for %s (%s), using default catalog", path, exc)
        return default_catalog()

    logger.info(
        "Catalog loaded from %s: products=%s faqs=%s",
        path,
        len(store.all_products()),
        len(store.all_faqs()),
    )
    return store
