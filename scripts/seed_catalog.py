#!/usr/bin/env python3
"""Seed demo content script.

Creates the database tables and seeds demo categories, products and
articles through the admin service, plus an optional demo user.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --user-id demo --user-email demo@example.com
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from coolstff.application.admin_service import AdminService
from coolstff.application.engagement_service import EngagementService
from coolstff.infrastructure.database import async_session_factory, create_tables
from coolstff.infrastructure.logging import configure_logging
from coolstff.infrastructure.sql_store import SqlContentStore


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed demo content")
    parser.add_argument("--user-id", help="Also register a demo user with this id")
    parser.add_argument("--user-email", default="demo@example.com")
    parser.add_argument("--user-name", default="Demo User")
    args = parser.parse_args()

    configure_logging(json_logs=False)

    print("=" * 60)
    print("coolstff Demo Content Seeder")
    print("=" * 60)

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    store = SqlContentStore(async_session_factory)

    result = await AdminService(store).seed_demo_content()
    print(f"  ✓ Categories: {result['categories']}")
    print(f"  ✓ Products: {result['products']}")
    print(f"  ✓ Articles: {result['articles']}")

    if args.user_id:
        user = await EngagementService(store).register_user(
            args.user_id, args.user_email, args.user_name
        )
        print(f"  ✓ User: {user.id} <{user.email}>")

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
