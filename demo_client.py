#!/usr/bin/env python3
"""Demo client that walks the complaint lifecycle against a running backend."""
import asyncio
import sys

import requests

from complainthub.config import ADMIN_PASSWORD, API_BASE_URL, get_service_url
from complainthub.models import ComplaintDraft
from complainthub.services.portal import ComplaintPortal

COMPLAINT_URL = get_service_url("complaint")


def show_complaints(portal):
    if not portal.complaints:
        print("  (no complaints found)")
    for c in portal.complaints:
        print(f"  {c.complaint_id:15} {c.status.value:9} {c.category.value:16} {c.name} - {c.description}")


async def demo_lifecycle():
    portal = ComplaintPortal.create(base_url=API_BASE_URL, secret=ADMIN_PASSWORD)

    print("\n" + "=" * 70)
    print("📝 COMPLAINTHUB DEMO")
    print("=" * 70)

    draft = ComplaintDraft(
        name="Alice",
        email="a@x.com",
        phone="",
        category="Billing Problem",
        description="Overcharged",
    )

    print("\nRegistering complaint...")
    result = await portal.register(draft)
    if not result.ok:
        print(f"❌ Error registering complaint: {result.error}")
        return
    complaint_id = result.value.complaint_id
    print(f"✓ Complaint registered successfully! Your complaint ID is: {complaint_id}")

    print("\nCurrent complaints:")
    show_complaints(portal)

    print("\nTrying to resolve without admin login...")
    refused = await portal.set_status(complaint_id, "resolved")
    print(f"✓ Refused: {refused.error}")

    print("\nAdmin login...")
    if not portal.login(ADMIN_PASSWORD):
        print("❌ Invalid password!")
        return
    print("✓ Logged in")

    updated = await portal.set_status(complaint_id, "resolved")
    if updated.ok:
        print(f"✓ Complaint {updated.value.complaint_id} marked as resolved!")
    else:
        print(f"❌ Error updating complaint: {updated.error}")

    print("\nCurrent complaints:")
    show_complaints(portal)

    portal.logout()
    portal.close()

    print("\n" + "=" * 70)
    print("✅ Demo completed!")
    print("=" * 70)


if __name__ == "__main__":
    try:
        resp = requests.get(f"{COMPLAINT_URL}/health", timeout=2)
        if resp.status_code == 200:
            print("✓ Complaint service is ready\n")
        else:
            print(f"⚠️  Complaint service returned {resp.status_code}")
    except requests.exceptions.RequestException:
        print("\n❌ Complaint service is not responding!")
        print("Please start services first: python3 start_services.py\n")
        sys.exit(1)

    asyncio.run(demo_lifecycle())
