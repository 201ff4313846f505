"""Script to seed categories and products from a JSON file through the API.

Expected file shape:
    {"categories": [{"name": ..., "description": ...,
                     "products": [{"name": ..., "description": ..., "price": ...,
                                   "stock_quantity": ..., "is_active": ...}]}]}
"""
import argparse
import json
import httpx
from typing import Any, Dict, Optional


def load_catalog(file_path: str) -> Dict[str, Any]:
    """Load the catalog from a JSON file."""
    with open(file_path, 'r') as f:
        return json.load(f)


def create_category(client: httpx.Client, category: Dict[str, Any]) -> Optional[int]:
    """Create a category and return its ID."""
    response = client.post(
        "/categories",
        json={"name": category["name"], "description": category["description"]},
    )
    if response.status_code == 201:
        category_id = response.json()["id"]
        print(f"✓ Category: {category['name']} (id={category_id})")
        return category_id

    print(f"✗ Failed category: {category['name']} - {response.status_code} {response.text}")
    return None


def create_product(client: httpx.Client, product: Dict[str, Any], category_id: int) -> bool:
    """Create a single product via API."""
    payload = {**product, "category_id": category_id}
    try:
        response = client.post("/products", json=payload)
    except httpx.HTTPError as e:
        print(f"✗ Error creating {product['name']}: {e}")
        return False

    if response.status_code == 201:
        print(f"  ✓ Created: {product['name']}")
        return True

    print(f"  ✗ Failed: {product['name']} - {response.status_code}")
    print(f"    Error: {response.text}")
    return False


def main():
    """Seed the catalog."""
    parser = argparse.ArgumentParser(description="Seed the catalog through the HTTP API")
    parser.add_argument("file", nargs="?", default="catalog.json", help="Catalog JSON file")
    parser.add_argument("--api-url", default="http://localhost:8080", help="Catalog API base URL")
    args = parser.parse_args()

    catalog = load_catalog(args.file)

    success_count = 0
    failed_count = 0

    print("-" * 60)
    with httpx.Client(base_url=args.api_url, timeout=30.0) as client:
        for category in catalog.get("categories", []):
            category_id = create_category(client, category)
            products = category.get("products", [])
            if category_id is None:
                failed_count += len(products)
                continue

            for product in products:
                if create_product(client, product, category_id):
                    success_count += 1
                else:
                    failed_count += 1

    print("-" * 60)
    print(f"Import complete: {success_count} succeeded, {failed_count} failed")


if __name__ == "__main__":
    main()
