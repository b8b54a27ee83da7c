#!/usr/bin/env python
"""
Smoke test for a running registry server.

Walks one citizen through create, duplicate create, list, findOne, update and
delete against the live HTTP API and prints each response.

Usage:
    python scripts/smoke_test_crud.py [base_url]   (default http://localhost:8000)
"""
import json
import sys

import requests

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"
API_URL = f"{BASE_URL.rstrip('/')}/api"

TEST_CITIZEN = {
    "NDI_ID": "SMOKE-0001",
    "FirstName": "Smoke",
    "LastName": "Tester",
    "DoB": "01-01-2000",
    "Email": "smoke.tester@example.com",
    "Phone": "0770000000",
    "Occupation": "Engineer, Driver",
    "Nationality": "Testland",
    "Blood_Group": "O+",
}


def print_separator(char="=", length=80):
    """Print a separator line."""
    print(f"\n{char * length}\n")


def show(step, response, expected_status):
    """Print a step result and return whether the status matched."""
    marker = "✅" if response.status_code == expected_status else "❌"
    print(f"{marker} {step}: HTTP {response.status_code} (expected {expected_status})")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)
    return response.status_code == expected_status


def run_smoke_test():
    key = TEST_CITIZEN["NDI_ID"]
    results = []

    print_separator()
    print(f"Citizen registry smoke test against {API_URL}")
    print_separator()

    # Clean up leftovers from a previous run
    requests.delete(f"{API_URL}/citizens/{key}/", timeout=10)

    response = requests.get(f"{BASE_URL.rstrip('/')}/health", timeout=10)
    results.append(show("Health", response, 200))

    response = requests.post(f"{API_URL}/citizens/", json=TEST_CITIZEN, timeout=10)
    results.append(show("Create", response, 201))

    response = requests.post(f"{API_URL}/citizens/", json=TEST_CITIZEN, timeout=10)
    results.append(show("Duplicate create", response, 409))

    response = requests.get(f"{API_URL}/citizens/", params={"name": "smoke"}, timeout=10)
    results.append(show("List by name", response, 200))

    response = requests.post(f"{API_URL}/citizens/findOne/", json={"nic": key}, timeout=10)
    results.append(show("Find one by NDI_ID", response, 200))

    response = requests.put(
        f"{API_URL}/citizens/{key}/", json={"Phone": "0771111111"}, timeout=10
    )
    results.append(show("Partial update", response, 200))

    response = requests.delete(f"{API_URL}/citizens/{key}/", timeout=10)
    results.append(show("Delete", response, 200))

    response = requests.get(f"{API_URL}/citizens/{key}/", timeout=10)
    results.append(show("Get after delete", response, 404))

    print_separator()
    passed = sum(results)
    print(f"{passed}/{len(results)} steps passed")
    return passed == len(results)


if __name__ == "__main__":
    try:
        ok = run_smoke_test()
    except requests.RequestException as e:
        print(f"❌ Could not reach {BASE_URL}: {str(e)}")
        sys.exit(1)
    sys.exit(0 if ok else 1)
