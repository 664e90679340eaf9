# playstore/db/schema.py

from sqlalchemy import MetaData, Table, Column, String, Float

metadata = MetaData()

apps = Table(
    "apps",
    metadata,
    Column("app_id", String(255), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("category", String(64), nullable=False),
    Column("rating", Float, nullable=True),
    Column("installs", String(32), nullable=True),
)
