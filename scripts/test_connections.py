#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the database is reachable and the dashboard computes.
Usage: python scripts/test_connections.py
"""
import asyncio
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.postgres import test_db_connection
from app.db.store import get_store
from app.services.dashboard_service import get_dashboard_stats


def main():
    settings = get_settings()
    print("=" * 50)
    print("PLACEMENT CELL - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing database...")
    if settings.database_url:
        print(f"    URL: {settings.database_url}")
    else:
        print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    if not test_db_connection():
        print("    ❌ Database: FAILED")
        return 1
    print("    ✅ Database: CONNECTED")

    print("\n[2] Computing dashboard...")
    stats = asyncio.run(get_dashboard_stats(get_store()))
    print(f"    Students: {stats.total_students}, Companies: {stats.total_companies}, Applications: {stats.total_applications}")
    print(f"    Placement rate: {stats.placement_rate:.1f}%  Average package: {stats.average_package:.2f} LPA")
    if stats.failed_reads:
        print(f"    ⚠️  Failed reads: {', '.join(stats.failed_reads)}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
