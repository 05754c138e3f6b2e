"""Interactive text menu for the meal planner (add / show / plan / save / exit).

Run ``python -m mealplanner.main`` for the menu, or ``python -m mealplanner.main serve``
to start the HTTP API instead.
"""
import logging
import sqlite3
import sys
from typing import Callable, Dict, List

import uvicorn

from mealplanner.api.api_run import app
from mealplanner.domain.Errors import MealPlannerError, StorageError
from mealplanner.domain.Meal import Meal, MealCategory
from mealplanner.domain.Plan import DayOfWeek, day_label
from mealplanner.infra.Database import open_database
from mealplanner.infra.Meal_Repository import Catalog, parse_ingredients
from mealplanner.infra.Plan_Repository import Planner
from mealplanner.infra.file_utils import save_lines
from mealplanner.logic.shopping.list_builder import Aggregator
from mealplanner.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL, MEALS_DB_PATH
from mealplanner.utilities.constants import (
    EMPTY_PLAN_MESSAGE, MEAL_NOT_FOUND_MESSAGE, WRONG_FORMAT_MESSAGE
)
from mealplanner.utilities.validators import is_valid_name

logger = logging.getLogger(__name__)

ACTIONS = ("add", "show", "plan", "save", "exit")
CATEGORY_CHOICES = ", ".join(c.value for c in MealCategory)


class MealPlannerMenu:
    def __init__(self, conn: sqlite3.Connection,
                 read: Callable[[], str] = input, echo: Callable[[str], None] = print):
        self.read = read
        self.echo = echo
        self.catalog = Catalog(conn)
        self.planner = Planner(conn, self.catalog)
        self.aggregator = Aggregator(self.catalog)

    # --- Prompts ----------------------------------------------------------
    def ask_category(self, question: str) -> MealCategory:
        self.echo(question)
        while True:
            try:
                return MealCategory.parse(self.read())
            except MealPlannerError as e:
                self.echo(str(e))

    def ask_name(self) -> str:
        self.echo("Input the meal's name:")
        while True:
            name = self.read()
            if is_valid_name(name):
                return name
            self.echo(WRONG_FORMAT_MESSAGE)

    def ask_ingredients(self) -> List[str]:
        while True:
            self.echo("Input the ingredients:")
            ingredients = parse_ingredients(self.read())
            if all(is_valid_name(i) for i in ingredients):
                return ingredients
            self.echo(WRONG_FORMAT_MESSAGE)

    def ask_meal(self, category: MealCategory, day: DayOfWeek) -> int:
        self.echo(f"Choose the {category.value} for {day_label(day)} from the list above:")
        while True:
            meal_id = self.catalog.resolve_meal_id(self.read(), category)
            if meal_id is not None:
                return meal_id
            self.echo(MEAL_NOT_FOUND_MESSAGE)

    # --- Actions ----------------------------------------------------------
    def add(self):
        category = self.ask_category(f"Which meal do you want to add ({CATEGORY_CHOICES})?")
        name = self.ask_name()
        ingredients = self.ask_ingredients()
        self.catalog.add_meal(category, name, ingredients)
        self.echo("The meal has been added!")

    def show(self):
        category = self.ask_category(f"Which category do you want to print ({CATEGORY_CHOICES})?")
        meals = self.catalog.list_meals(category)
        if not meals:
            self.echo("No meals found.")
            return
        self.echo(f"Category: {category.value}")
        for meal in meals:
            self.echo("")
            self.echo(str(meal))

    def plan(self):
        meals_by_category: Dict[MealCategory, List[Meal]] = {
            category: sorted(self.catalog.list_meals(category), key=lambda m: m.name)
            for category in MealCategory
        }
        missing = [c.value for c, meals in meals_by_category.items() if not meals]
        if missing:
            self.echo(f"Unable to plan. Add a meal for: {', '.join(missing)}.")
            return
        for day in DayOfWeek:
            self.echo(day_label(day))
            choices: Dict[MealCategory, int] = {}
            for category, meals in meals_by_category.items():
                for meal in meals:
                    self.echo(meal.name)
                choices[category] = self.ask_meal(category, day)
            self.planner.plan_day(day, choices)
            self.echo(f"Yeah! We planned the meals for {day_label(day)}.")
            self.echo("")
        self.planner.display(self.planner.current_plan(), echo=self.echo)

    def save(self):
        plan = self.planner.current_plan()
        if plan.is_empty():
            self.echo(EMPTY_PLAN_MESSAGE)
            return
        self.echo("Input a filename:")
        filename = self.read().strip()
        lines = self.aggregator.render(self.aggregator.build_shopping_list(plan))
        save_lines(filename, lines)
        self.echo("Saved!")

    def run(self):
        handlers = {"add": self.add, "show": self.show, "plan": self.plan, "save": self.save}
        while True:
            self.echo(f"What would you like to do ({', '.join(ACTIONS)})?")
            try:
                action = self.read().strip().lower()
            except EOFError:
                action = "exit"
            if action == "exit":
                break
            handler = handlers.get(action)
            if handler is None:
                continue
            try:
                handler()
            except EOFError:
                break
            except MealPlannerError as e:
                logger.warning(f"{action} aborted: {e}")
                self.echo(str(e))
        self.echo("Bye!")


def serve():
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if argv and argv[0] == "serve":
        serve()
        return 0
    try:
        conn = open_database(argv[0] if argv else MEALS_DB_PATH)
    except StorageError as e:
        print(f"Cannot start: {e}")
        return 1
    try:
        MealPlannerMenu(conn).run()
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
