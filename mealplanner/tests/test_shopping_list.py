import unittest
import pytest
from mealplanner.domain.Errors import StorageError
from mealplanner.domain.ShoppingList import ShoppingList
from mealplanner.infra.Database import open_database
from mealplanner.infra.Meal_Repository import Catalog
from mealplanner.infra.Plan_Repository import Planner
from mealplanner.infra.file_utils import save_lines
from mealplanner.logic.shopping.list_builder import Aggregator


class TestAggregator(unittest.TestCase):

    def setUp(self):
        self.conn = open_database(":memory:")
        self.catalog = Catalog(self.conn)
        self.planner = Planner(self.conn, self.catalog)
        self.aggregator = Aggregator(self.catalog)

    def tearDown(self):
        self.conn.close()

    def test_egg_used_on_two_days(self):
        omelette = self.catalog.add_meal("breakfast", "Omelette", ["Egg", "Milk"])
        self.planner.assign("Monday", "breakfast", omelette.meal_id)
        self.planner.assign("Wednesday", "breakfast", omelette.meal_id)
        lines = self.aggregator.render(self.aggregator.build_shopping_list(self.planner.current_plan()))
        self.assertIn("Egg x2", lines)
        self.assertIn("Milk x2", lines)

    def test_counts_sum_to_all_ingredient_occurrences(self):
        meals = [
            self.catalog.add_meal("breakfast", "Omelette", ["Egg", "Milk", "Salt"]),
            self.catalog.add_meal("lunch", "Salad", ["Lettuce", "Tomato", "Salt"]),
            self.catalog.add_meal("dinner", "Pasta", ["Tomato", "Pasta"]),
        ]
        for day in ("Monday", "Tuesday", "Sunday"):
            for meal in meals:
                self.planner.assign(day, meal.category, meal.meal_id)
        plan = self.planner.current_plan()
        shopping_list = self.aggregator.build_shopping_list(plan)
        expected = sum(len(self.catalog.get_ingredients(slot.meal_id)) for slot in plan)
        self.assertEqual(shopping_list.total(), expected)
        self.assertEqual(shopping_list.get_count("Salt"), 6)
        self.assertEqual(shopping_list.get_count("Tomato"), 6)
        self.assertEqual(shopping_list.get_count("Pasta"), 3)

    def test_empty_plan(self):
        shopping_list = self.aggregator.build_shopping_list(self.planner.current_plan())
        self.assertTrue(shopping_list.is_empty())
        self.assertEqual(self.aggregator.render(shopping_list), [])

    def test_names_are_not_case_folded(self):
        lunch = self.catalog.add_meal("lunch", "Toast", ["egg", "Bread"])
        dinner = self.catalog.add_meal("dinner", "Fried Rice", ["Egg", "Rice"])
        self.planner.assign("Monday", "lunch", lunch.meal_id)
        self.planner.assign("Monday", "dinner", dinner.meal_id)
        lines = self.aggregator.render(self.aggregator.build_shopping_list(self.planner.current_plan()))
        self.assertEqual(lines, ["Bread", "Egg", "Rice", "egg"])

    def test_render_format(self):
        shopping_list = ShoppingList()
        shopping_list.add_item("Tomato")
        shopping_list.add_item("Egg", 3)
        self.assertEqual(Aggregator.render(shopping_list), ["Egg x3", "Tomato"])
        with self.assertRaises(ValueError):
            shopping_list.add_item("Egg", 0)


def test_save_lines_replaces_existing_file(tmp_path):
    target = tmp_path / "shopping.txt"
    target.write_text("old content\nthat should go\n", encoding="utf-8")
    save_lines(target, ["Egg x2", "Tomato"])
    assert target.read_text(encoding="utf-8") == "Egg x2\nTomato\n"
    assert [p.name for p in tmp_path.iterdir()] == ["shopping.txt"]


def test_save_lines_reports_storage_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(StorageError):
        save_lines(blocker / "shopping.txt", ["Egg"])
