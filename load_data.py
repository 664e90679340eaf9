# load_data.py
"""
Load an apps CSV into the configured database.

Usage:
    python load_data.py [path/to/apps.csv]
"""

import sys

from scripts.ingest import parse_apps_csv, load_into_db, FILE_PATH


def main():
    file_path = sys.argv[1] if len(sys.argv) > 1 else FILE_PATH
    apps_list, stats = parse_apps_csv(file_path)
    load_into_db(apps_list)

    print("Load complete.")
    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Apps loaded:           {stats['n_apps']}")
    print(f"Rows with errors:      {stats['n_errors']}")
    print(f"Duplicate app ids:     {stats['n_duplicate_apps']}")


if __name__ == "__main__":
    main()
