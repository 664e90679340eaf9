# scripts/ingest.py

import csv
import logging
import math
import sys
from typing import Optional

from sqlalchemy.engine import Engine

from playstore.config import get_settings
from playstore.db.engine import build_engine
from playstore.db.schema import apps

logger = logging.getLogger(__name__)

FILE_PATH = "data/apps.csv"


# ---- Helpers ----

def clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_rating(value: Optional[str]) -> Optional[float]:
    value = clean_text(value)
    if value is None:
        return None
    rating = float(value)
    if math.isnan(rating):
        return None
    return rating


def parse_apps_csv(file_path: str = FILE_PATH):
    """
    Read an apps CSV with the columns app_id, name, category, rating, installs.

    Rows missing an id, name or category are counted as errors; a repeated
    app_id keeps the last row seen.
    """
    apps_by_id = {}

    n_rows = 0
    n_errors = 0
    error_examples = []

    duplicate_count = 0
    duplicate_examples: list[str] = []

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                app_id = clean_text(row["app_id"])
                name = clean_text(row["name"])
                category = clean_text(row["category"])
                if not (app_id and name and category):
                    raise ValueError("app_id, name and category are required")

                record = {
                    "app_id": app_id,
                    "name": name,
                    "category": category,
                    "rating": parse_rating(row.get("rating")),
                    "installs": clean_text(row.get("installs")),
                }
            except (KeyError, ValueError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {"row_number": n_rows, "row": dict(row), "error": repr(e)}
                    )
                continue

            if app_id in apps_by_id:
                duplicate_count += 1
                if len(duplicate_examples) < 5:
                    duplicate_examples.append(f"Duplicate app_id {app_id!r} at CSV row {n_rows}")

            apps_by_id[app_id] = record

    apps_list = list(apps_by_id.values())

    stats = {
        "n_rows": n_rows,
        "n_apps": len(apps_list),
        "n_errors": n_errors,
        "error_examples": error_examples,
        "n_duplicate_apps": duplicate_count,
        "duplicate_app_examples": duplicate_examples,
    }
    return apps_list, stats


def load_into_db(apps_list, engine: Optional[Engine] = None):
    """Replace the contents of the apps table in a single transaction."""
    engine = engine or build_engine(get_settings())
    with engine.begin() as conn:
        conn.execute(apps.delete())
        if apps_list:
            conn.execute(apps.insert(), apps_list)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    file_path = sys.argv[1] if len(sys.argv) > 1 else FILE_PATH
    apps_list, stats = parse_apps_csv(file_path)
    load_into_db(apps_list)

    logger.info("Total CSV rows read:   %s", stats["n_rows"])
    logger.info("Apps loaded:           %s", stats["n_apps"])
    logger.info("Rows with errors:      %s", stats["n_errors"])
    logger.info("Duplicate app ids:     %s", stats["n_duplicate_apps"])
    for example in stats["duplicate_app_examples"]:
        logger.warning("Duplicate app example: %s", example)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
