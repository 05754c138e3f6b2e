"""Planner: the weekly plan stored as one row per (day, category) slot."""
import logging
import sqlite3
from typing import Callable, Dict, List, Optional

from mealplanner.domain.Errors import LogicError, NotFoundError, StorageError
from mealplanner.domain.Meal import MealCategory
from mealplanner.domain.Plan import DayOfWeek, PlanSlot, WeeklyPlan, day_label
from mealplanner.infra.Database import fetch_all, transaction
from mealplanner.infra.Meal_Repository import Catalog
from mealplanner.utilities.constants import MEALS_TABLE, PLANS_TABLE

logger = logging.getLogger(__name__)

_UPSERT_SLOT_SQL = f"""
    INSERT INTO {PLANS_TABLE} (day_of_week, meal_category, meal_id)
    VALUES (?, ?, ?)
    ON CONFLICT (day_of_week, meal_category) DO UPDATE SET meal_id = excluded.meal_id
"""


def format_plan(plan: WeeklyPlan) -> List[str]:
    """Lines for the weekly plan: day label, one "Category: meal" line per slot, blank line."""
    lines: List[str] = []
    for day, slots in plan.by_day().items():
        lines.append(day_label(day))
        lines.extend(str(slot) for slot in slots)
        lines.append("")
    return lines


class Planner:
    def __init__(self, conn: sqlite3.Connection, catalog: Optional[Catalog] = None):
        self.conn = conn
        self.catalog = catalog or Catalog(conn)

    def _check_meal(self, category: MealCategory, meal_id: int):
        """A slot may only reference an existing meal of the slot's own category."""
        try:
            meal = self.catalog.get_meal(meal_id)
        except NotFoundError:
            raise LogicError(f"Cannot plan meal {meal_id}: no such meal") from None
        if meal.category != category:
            raise LogicError(
                f"Cannot plan {meal.category.value} {meal.name!r} as {category.value}"
            )

    def assign(self, day: DayOfWeek, category: MealCategory, meal_id: int) -> None:
        """Put a meal into the (day, category) slot, replacing whatever was there.

        Runs as a single upsert on the slot's unique key, so the slot is never duplicated.
        """
        day, category = DayOfWeek.parse(day), MealCategory.parse(category)
        self._check_meal(category, meal_id)
        with transaction(self.conn, f"Planning {category.value} for {day.value}"):
            self.conn.execute(_UPSERT_SLOT_SQL, (day.value, category.value, meal_id))
        logger.info(f"Planned meal {meal_id} as {category.value} on {day.value}")

    def plan_day(self, day: DayOfWeek, choices: Dict[MealCategory, int]) -> None:
        """Assign one meal per category for a day; the day's slots are committed together."""
        day = DayOfWeek.parse(day)
        checked = []
        for category, meal_id in choices.items():
            category = MealCategory.parse(category)
            self._check_meal(category, meal_id)
            checked.append((category, meal_id))
        with transaction(self.conn, f"Planning meals for {day.value}"):
            self.conn.executemany(
                _UPSERT_SLOT_SQL,
                [(day.value, category.value, meal_id) for category, meal_id in checked],
            )
        logger.info(f"Planned {len(checked)} meals for {day.value}")

    def current_plan(self) -> WeeklyPlan:
        """Every stored slot resolved to its meal name.

        A slot pointing at a meal that no longer exists is a consistency violation
        and raises StorageError instead of being dropped.
        """
        rows = fetch_all(
            self.conn,
            f"""
            SELECT p.day_of_week, p.meal_category, p.meal_id, m.meal
            FROM {PLANS_TABLE} AS p
            LEFT JOIN {MEALS_TABLE} AS m ON p.meal_id = m.meal_id
            """,
            action="Getting weekly plan",
        )
        plan = WeeklyPlan()
        for row in rows:
            if row["meal"] is None:
                logger.error(f"Plan slot {row['day_of_week']}/{row['meal_category']} "
                             f"references missing meal {row['meal_id']}")
                raise StorageError(
                    f"Plan for {row['day_of_week']} {row['meal_category']} references "
                    f"missing meal {row['meal_id']}"
                )
            plan.add_slot(PlanSlot(row["day_of_week"], row["meal_category"], row["meal_id"], row["meal"]))
        return plan

    def is_empty(self) -> bool:
        rows = fetch_all(self.conn, f"SELECT 1 FROM {PLANS_TABLE} LIMIT 1", action="Checking plan")
        return not rows

    @staticmethod
    def display(plan: WeeklyPlan, echo: Callable[[str], None] = print) -> List[str]:
        '''Print the plan through ``echo`` and return the printed lines.'''
        lines = format_plan(plan)
        for line in lines:
            echo(line)
        return lines


__all__ = ['Planner', 'format_plan']
