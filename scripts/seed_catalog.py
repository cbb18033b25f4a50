#!/usr/bin/env python3
"""
Seed script: creates brands and products through the gateway (which forwards to upstream).
Run: API must be running with AUTH_USERS configured.
  python scripts/seed_catalog.py --username admin --password secret
  python scripts/seed_catalog.py --brands 5 --products-per-brand 10
"""

import argparse
import random
import sys

import httpx

API_BASE = "http://localhost:8000/api/v1"

BRANDS = [
    "Sunline", "Tidewater", "Coral Bay", "Driftwood", "Saltair",
    "Palm Coast", "Seabreeze", "Bluewave", "Sandbar", "Lighthouse",
]

PRODUCTS = [
    "Beach towel", "Sun hat", "Flip flops", "Cooler bag", "Beach umbrella",
    "Snorkel set", "Sunscreen SPF 50", "Folding chair", "Surf wax", "Boardshorts",
    "Swim goggles", "Beach ball", "Waterproof phone case", "Rash guard", "Sand toys",
]


def main():
    ap = argparse.ArgumentParser(description="Seed brands and products via the gateway API")
    ap.add_argument("--brands", type=int, default=3, help="Number of brands to create")
    ap.add_argument("--products-per-brand", type=int, default=5, help="Products per brand")
    ap.add_argument("--username", default="admin")
    ap.add_argument("--password", required=True)
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created_products = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        r = client.post("/users/login", json={"username": args.username, "password": args.password})
        if r.status_code != 200:
            sys.exit(f"Login failed: {r.status_code} {r.text[:80]}")
        headers = {"Authorization": f"Bearer {r.json()['access_token']}"}

        brand_names = random.sample(BRANDS, k=min(args.brands, len(BRANDS)))
        print(f"Creating {len(brand_names)} brands...")
        for name in brand_names:
            r = client.post("/brands", json={"name": name})
            # 409: brand already exists upstream, products can still reference it by name
            if r.status_code not in (200, 409):
                errors.append(f"Brand {name}: {r.status_code} {r.json().get('message')}")

        for name in brand_names:
            for i in range(args.products_per_brand):
                title = random.choice(PRODUCTS)
                sku = f"{name[:3].upper()}-{random.randint(10000, 99999)}-{i}"
                r = client.post(
                    "/products",
                    headers=headers,
                    json={
                        "name": f"{name} {title} {sku}",
                        "type": "physical",
                        "sku": sku,
                        "price": round(random.uniform(4.99, 149.99), 2),
                        "weight": round(random.uniform(0.1, 5.0), 2),
                        "inventory_level": random.randint(1, 200),
                        "brand_name": name,
                    },
                )
                if r.status_code == 200:
                    created_products += 1
                else:
                    errors.append(f"Product {sku}: {r.status_code} {r.json().get('message')}")
            print(f"  Brand {name}: total products so far {created_products}")

    print(f"\nDone. Products created: {created_products}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
