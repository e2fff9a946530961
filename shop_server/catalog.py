"""Static product catalog."""

from typing import Any, Dict, List, NamedTuple


class Product(NamedTuple):
    id: str
    name: str
    price: float


PRODUCTS = (
    Product(id="1", name="Product 1", price=10),
    Product(id="2", name="Product 2", price=20),
    Product(id="3", name="Product 3", price=30),
)


def list_products() -> List[Dict[str, Any]]:
    """Return the catalog as fresh dicts, keys in id/name/price order"""
    return [product._asdict() for product in PRODUCTS]
