"""FastAPI dependencies: one SQLite connection per request, shared by the services built on it."""
import sqlite3
from typing import Iterator

from fastapi import Depends, Request

from mealplanner.infra.Database import connect
from mealplanner.infra.Meal_Repository import Catalog
from mealplanner.infra.Plan_Repository import Planner
from mealplanner.logic.shopping.list_builder import Aggregator


def get_db(request: Request) -> Iterator[sqlite3.Connection]:
    conn = connect(request.app.state.db_path)
    try:
        yield conn
    finally:
        conn.close()


def get_catalog(conn: sqlite3.Connection = Depends(get_db)) -> Catalog:
    return Catalog(conn)


def get_planner(conn: sqlite3.Connection = Depends(get_db),
                catalog: Catalog = Depends(get_catalog)) -> Planner:
    return Planner(conn, catalog)


def get_aggregator(catalog: Catalog = Depends(get_catalog)) -> Aggregator:
    return Aggregator(catalog)
