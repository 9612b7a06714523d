#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables if needed and loads the sample catalog.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
"""

import argparse
import asyncio

from catalog_api.catalog.seed import seed_catalog
from catalog_api.infrastructure.database import Base, async_session_factory, engine


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the sample product catalog",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing catalog rows before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    async with async_session_factory() as session:
        result = await seed_catalog(session, clear_existing=not args.no_clear)

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Variants: {result['variants_created']}")
    print()

    await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
