# This project was developed with assistance from AI tools.
"""CLI entrypoint for demo catalog seeding.

Usage:
    python -m lendscope.seed          # Seed demo catalog
    python -m lendscope.seed --force  # Clear and re-seed
"""

import argparse
import asyncio
import json
import sys

from lendscope_db import SessionLocal

from .services.seed.seeder import seed_demo_data


async def main(force: bool = False) -> None:
    """Run demo catalog seeding."""
    async with SessionLocal() as session:
        result = await seed_demo_data(session, force=force)
        print(json.dumps(result, indent=2, default=str))

        if result.get("status") == "already_seeded":
            print("\nDemo catalog already seeded. Use --force to re-seed.")
            sys.exit(0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed Lendscope demo catalog")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Clear existing demo catalog and re-seed",
    )
    args = parser.parse_args()
    asyncio.run(main(force=args.force))
