#!/usr/bin/env python3
"""Smoke test for the booking assistant HTTP API against a running server."""

import os
import sys

import httpx


BASE_URL = os.getenv("SCHEDULA_BASE_URL", "http://127.0.0.1:8000")


def check_health() -> bool:
    print("=" * 60)
    print("Testing GET /health")
    print("=" * 60)
    try:
        response = httpx.get(f"{BASE_URL}/health", timeout=10.0)
        response.raise_for_status()
        print(f"✅ {response.json()}")
        return True
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


def send_chat(message: str, session_id: str | None) -> str | None:
    print("\n" + "=" * 60)
    print(f"Testing POST /api/chat: {message!r}")
    print("=" * 60)

    payload = {"message": message}
    if session_id:
        payload["session_id"] = session_id

    try:
        response = httpx.post(f"{BASE_URL}/api/chat", json=payload, timeout=30.0)
        response.raise_for_status()
        data = response.json()
        print(f"✅ intent={data['intent']} session_id={data['session_id']}")
        print(f"Reply length: {len(data['response'])} chars")
        return data["session_id"]
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None
    except Exception as e:
        print(f"❌ Error: {e}")
        return None


def search_bookings(**params: str) -> bool:
    print("\n" + "=" * 60)
    print(f"Testing GET /api/bookings/search {params}")
    print("=" * 60)
    try:
        response = httpx.get(f"{BASE_URL}/api/bookings/search", params=params, timeout=10.0)
        response.raise_for_status()
        bookings = response.json()
        print(f"✅ {len(bookings)} booking(s)")
        for booking in bookings[:5]:
            print(f"  {booking['id']}: {booking['title']} @ {booking['startTime']}")
        return True
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


def list_training_types(category: str | None = None) -> bool:
    print("\n" + "=" * 60)
    print(f"Testing GET /api/training-types category={category}")
    print("=" * 60)
    params = {"category": category} if category else {}
    try:
        response = httpx.get(f"{BASE_URL}/api/training-types", params=params, timeout=10.0)
        response.raise_for_status()
        for entry in response.json():
            print(f"  {entry['id']}. {entry['name']} ({entry['category']}, {entry['duration']} min)")
        return True
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


def main() -> int:
    print(f"Testing API at {BASE_URL}\n")
    if not check_health():
        print("\n❌ Server is not reachable")
        return 1

    session_id = send_chat("book training tomorrow at 2 PM to 3 PM", None)
    session_id = send_chat("show my bookings", session_id)
    ok = session_id is not None
    ok = search_bookings(q="training") and ok
    ok = list_training_types() and ok
    ok = list_training_types("azure") and ok

    print("\n" + "=" * 60)
    print("✅ All checks passed" if ok else "❌ Some checks failed")
    print("=" * 60)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
