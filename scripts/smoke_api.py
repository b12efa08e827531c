#!/usr/bin/env python3
"""Smoke test against a running salon API server."""

import sys
import time

import httpx


BASE_URL = "http://127.0.0.1:3000"


def check_services() -> int | None:
    """Create, read, update and delete a service."""
    print("=" * 60)
    print("Testing /api/services")
    print("=" * 60)

    payload = {
        "name": "Haircut",
        "category": "hair",
        "subcategory": "cut",
        "gender": "women",
        "price": 500,
        "duration": "30 min",
        "popular": True,
    }

    try:
        response = httpx.post(f"{BASE_URL}/api/services", json=payload, timeout=10.0)
        response.raise_for_status()
        service = response.json()["data"]
        print(f"✅ Created service id={service['id']}")

        response = httpx.put(
            f"{BASE_URL}/api/services/{service['id']}",
            json={"price": 550},
            timeout=10.0,
        )
        response.raise_for_status()
        print(f"✅ Updated price to {response.json()['data']['price']}")

        response = httpx.get(f"{BASE_URL}/api/categories", params={"gender": "women"}, timeout=10.0)
        response.raise_for_status()
        print(f"✅ Categories: {response.json()['data']}")

        response = httpx.delete(f"{BASE_URL}/api/services/{service['id']}", timeout=10.0)
        response.raise_for_status()
        print("✅ Deleted")
        return service["id"]
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def check_loyalty() -> bool:
    """Register a card and add points."""
    print("\n" + "=" * 60)
    print("Testing /api/loyalty-cards")
    print("=" * 60)

    email = f"smoke{int(time.time())}@example.com"
    try:
        response = httpx.post(
            f"{BASE_URL}/api/loyalty-cards",
            json={"name": "Smoke Test", "email": email, "phone": "9876543210"},
            timeout=10.0,
        )
        response.raise_for_status()
        print(f"✅ Registered {email}")

        response = httpx.put(f"{BASE_URL}/api/loyalty-cards/{email}", json={"addPoints": 250}, timeout=10.0)
        response.raise_for_status()
        card = response.json()["data"]
        print(f"✅ points={card['points']} tier={card['tier']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False


def main():
    print("\n🚀 Testing Salon API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn luxe_salon.main:app --reload --port 3000")
        sys.exit(1)

    check_services()
    check_loyalty()

    print("\n" + "=" * 60)
    print("✅ Smoke run complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
