"""Catalog: meal and ingredient records stored in SQLite."""
import logging
import sqlite3
from typing import Dict, List, Optional

from mealplanner.domain.Errors import NotFoundError
from mealplanner.domain.Meal import Meal, MealCategory
from mealplanner.infra.Database import fetch_all, transaction
from mealplanner.utilities.constants import MEALS_TABLE, INGREDIENTS_TABLE, INGREDIENT_SEPARATOR
from mealplanner.utilities.validators import validate_meal

logger = logging.getLogger(__name__)


def parse_ingredients(text: str) -> List[str]:
    """Split a comma separated line ("Tomato, Pasta") into trimmed ingredient names."""
    return [part.strip() for part in (text or "").split(INGREDIENT_SEPARATOR)]


class Catalog:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def add_meal(self, category: MealCategory, name: str, ingredients: List[str]) -> Meal:
        """Validate and store a meal together with its ingredients.

        The meal row and every ingredient row are written in one transaction, so a
        failure never leaves a meal without its ingredients. Raises ValidationError
        before touching storage, StorageError if the write fails.
        """
        data = validate_meal(category, name, ingredients)
        with transaction(self.conn, f"Inserting meal {data.name!r}"):
            cur = self.conn.execute(
                f"INSERT INTO {MEALS_TABLE} (category, meal) VALUES (?, ?)",
                (data.category.value, data.name),
            )
            meal_id = cur.lastrowid
            self.conn.executemany(
                f"INSERT INTO {INGREDIENTS_TABLE} (ingredient, meal_id) VALUES (?, ?)",
                [(ingredient, meal_id) for ingredient in data.ingredients],
            )
        logger.info(f"Added {data.category.value} {data.name!r} (id {meal_id}, {len(data.ingredients)} ingredients)")
        return Meal(data.category, data.name, data.ingredients, meal_id)

    def list_meals(self, category: MealCategory) -> List[Meal]:
        '''All meals of a category in storage order, ingredients resolved.'''
        category = MealCategory.parse(category)
        rows = fetch_all(
            self.conn,
            f"""
            SELECT m.meal_id, m.meal, i.ingredient
            FROM {MEALS_TABLE} AS m
            LEFT JOIN {INGREDIENTS_TABLE} AS i ON i.meal_id = m.meal_id
            WHERE m.category = ?
            ORDER BY m.meal_id, i.ingredient_id
            """,
            (category.value,),
            action="Getting meals",
        )
        meals: Dict[int, Meal] = {}
        for row in rows:
            meal = meals.get(row["meal_id"])
            if meal is None:
                meal = meals[row["meal_id"]] = Meal(category, row["meal"], meal_id=row["meal_id"])
            if row["ingredient"] is not None:
                meal.ingredients.append(row["ingredient"])
        return list(meals.values())

    def resolve_meal_id(self, name: str, category: MealCategory) -> Optional[int]:
        '''Exact match on name and category; None when no such meal exists.'''
        category = MealCategory.parse(category)
        rows = fetch_all(
            self.conn,
            f"SELECT meal_id FROM {MEALS_TABLE} WHERE meal = ? AND category = ? ORDER BY meal_id",
            (name, category.value),
            action="Getting meal by name and category",
        )
        if not rows:
            return None
        # Duplicate names are allowed; the latest one wins
        return rows[-1]["meal_id"]

    def get_ingredients(self, meal_id: int) -> List[str]:
        rows = fetch_all(
            self.conn,
            f"SELECT ingredient FROM {INGREDIENTS_TABLE} WHERE meal_id = ? ORDER BY ingredient_id",
            (meal_id,),
            action="Getting meal ingredients",
        )
        return [row["ingredient"] for row in rows]

    def get_meal(self, meal_id: int) -> Meal:
        rows = fetch_all(
            self.conn,
            f"SELECT meal_id, category, meal FROM {MEALS_TABLE} WHERE meal_id = ?",
            (meal_id,),
            action="Getting meal",
        )
        if not rows:
            raise NotFoundError(f"Meal {meal_id} not found")
        row = rows[0]
        return Meal(row["category"], row["meal"], self.get_ingredients(meal_id), row["meal_id"])


__all__ = ['Catalog', 'parse_ingredients']
