# tests/test_ingest.py

from sqlalchemy import func, select

from playstore.db.schema import apps
from scripts.ingest import load_into_db, parse_apps_csv, parse_rating

CSV_TEXT = """app_id,name,category,rating,installs
com.example.foo,Foo,Game,4.5,"10,000+"
com.example.bar,Bar,Tools,,500+
com.example.baz,Baz,Tools,NaN,100+
,Nameless,Game,3.0,10+
com.example.foo,Foo Deluxe,Game,4.7,"50,000+"
com.example.bad,Bad,Game,not-a-number,1+
"""


def _write_csv(tmp_path):
    path = tmp_path / "apps.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return str(path)


def test_parse_rating():
    assert parse_rating("4.1") == 4.1
    assert parse_rating("") is None
    assert parse_rating("NaN") is None
    assert parse_rating(None) is None


def test_parse_apps_csv_stats(tmp_path):
    apps_list, stats = parse_apps_csv(_write_csv(tmp_path))

    assert stats["n_rows"] == 6
    assert stats["n_errors"] == 2
    assert stats["n_duplicate_apps"] == 1
    assert stats["n_apps"] == 3

    by_id = {a["app_id"]: a for a in apps_list}
    assert by_id["com.example.foo"]["name"] == "Foo Deluxe"
    assert by_id["com.example.foo"]["installs"] == "50,000+"
    assert by_id["com.example.bar"]["rating"] is None
    assert by_id["com.example.baz"]["rating"] is None


def test_load_into_db_replaces_rows(tmp_path, engine, seed):
    seed([{"app_id": "old.app", "category": "Game"}])
    apps_list, _ = parse_apps_csv(_write_csv(tmp_path))

    load_into_db(apps_list, engine)

    with engine.connect() as conn:
        ids = set(conn.execute(select(apps.c.app_id)).scalars())
        count = conn.execute(select(func.count()).select_from(apps)).scalar_one()

    assert "old.app" not in ids
    assert count == 3
