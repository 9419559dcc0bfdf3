#!/usr/bin/env python3
"""
Seed the public schedule template catalog.

Templates are read-only to the API; this script is how they get into the
schedule_templates table. Existing templates (matched by name) are left
alone unless --replace is given.

Usage:
    python scripts/seed_templates.py            # insert missing templates
    python scripts/seed_templates.py --replace  # rewrite template_data too
    python scripts/seed_templates.py --dry-run  # validate and print only
"""

import argparse
import logging
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.models.schedule import TemplateBlueprint

logger = logging.getLogger("seed_templates")

TABLE = "schedule_templates"

BUILTIN_TEMPLATES = [
    {
        "name": "Full Day Shoot",
        "description": "Standard 10-hour studio day with two shoot blocks",
        "template_data": [
            {"title": "Crew Call", "start_time": "07:00", "end_time": "07:30", "category": "setup",
             "description": "Load in, coffee, safety briefing"},
            {"title": "Lighting & Set Build", "start_time": "07:30", "end_time": "09:00", "category": "setup"},
            {"title": "Hair & Makeup", "start_time": "07:30", "end_time": "09:00", "category": "prep"},
            {"title": "Shoot Block 1", "start_time": "09:00", "end_time": "12:30", "category": "shoot"},
            {"title": "Lunch", "start_time": "12:30", "end_time": "13:30", "category": "break"},
            {"title": "Shoot Block 2", "start_time": "13:30", "end_time": "16:30", "category": "shoot"},
            {"title": "Wrap & Strike", "start_time": "16:30", "end_time": "17:00", "category": "wrap"},
        ],
    },
    {
        "name": "Half Day Shoot",
        "description": "Morning session, wrapped by lunch",
        "template_data": [
            {"title": "Crew Call", "start_time": "08:00", "end_time": "08:30", "category": "setup"},
            {"title": "Hair & Makeup", "start_time": "08:00", "end_time": "09:00", "category": "prep"},
            {"title": "Shoot", "start_time": "09:00", "end_time": "12:00", "category": "shoot"},
            {"title": "Wrap", "start_time": "12:00", "end_time": "12:30", "category": "wrap"},
        ],
    },
    {
        "name": "Location Day",
        "description": "Exterior shoot with travel and a weather window",
        "template_data": [
            {"title": "Base Camp Call", "start_time": "06:00", "end_time": "06:30", "category": "setup",
             "notes": "Meet at parking lot, shuttle to set"},
            {"title": "Hair & Makeup", "start_time": "06:30", "end_time": "07:30", "category": "prep"},
            {"title": "Golden Hour Block", "start_time": "07:30", "end_time": "09:30", "category": "shoot"},
            {"title": "Company Move", "start_time": "09:30", "end_time": "10:30", "category": "general"},
            {"title": "Shoot Block 2", "start_time": "10:30", "end_time": "13:00", "category": "shoot"},
            {"title": "Lunch", "start_time": "13:00", "end_time": "14:00", "category": "break"},
            {"title": "Wrap & Travel", "start_time": "14:00", "end_time": "15:00", "category": "wrap"},
        ],
    },
]


def validate_templates(templates: list[dict]) -> list[dict]:
    """
    Validate every blueprint and return rows ready for insert.

    Raises:
        pydantic.ValidationError: If any blueprint is invalid
    """
    rows = []
    for template in templates:
        blueprints = [TemplateBlueprint(**item) for item in template["template_data"]]
        rows.append({
            "name": template["name"],
            "description": template.get("description", ""),
            "is_public": True,
            "template_data": [bp.model_dump(mode="json", exclude_none=True) for bp in blueprints],
        })
    return rows


def seed(rows: list[dict], replace: bool = False) -> tuple[int, int]:
    """
    Insert templates that don't exist yet; optionally refresh the rest.

    Returns:
        (inserted, updated)
    """
    from lib.supabase_client import SupabaseClient

    existing = {row["name"]: row for row in SupabaseClient.fetch_rows(TABLE, columns="id,name")}

    missing = [row for row in rows if row["name"] not in existing]
    inserted = SupabaseClient.insert_rows(TABLE, missing)

    updated = 0
    if replace:
        for row in rows:
            if row["name"] in existing:
                SupabaseClient.update_row(TABLE, existing[row["name"]]["id"], row)
                updated += 1

    return len(inserted), updated


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed public schedule templates")
    parser.add_argument("--replace", action="store_true", help="Overwrite templates that already exist")
    parser.add_argument("--dry-run", action="store_true", help="Validate and print, don't write")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    rows = validate_templates(BUILTIN_TEMPLATES)
    if args.dry_run:
        for row in rows:
            print(f"{row['name']}: {len(row['template_data'])} items")
        return 0

    inserted, updated = seed(rows, replace=args.replace)
    logger.info(f"Seeded schedule templates: {inserted} inserted, {updated} updated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
