import unittest
from mealplanner.domain.Errors import ValidationError
from mealplanner.domain.Meal import Meal, MealCategory, category_label
from mealplanner.domain.Plan import DayOfWeek, PlanSlot, WeeklyPlan, day_label


class TestMeal(unittest.TestCase):

    def test_category_parse_ignores_case(self):
        self.assertEqual(MealCategory.parse("Dinner"), MealCategory.DINNER)
        self.assertEqual(MealCategory.parse("BREAKFAST"), MealCategory.BREAKFAST)
        self.assertIs(MealCategory.parse(MealCategory.LUNCH), MealCategory.LUNCH)
        with self.assertRaises(ValidationError):
            MealCategory.parse("brunch")

    def test_parse_rejects_surrounding_whitespace(self):
        with self.assertRaises(ValidationError):
            MealCategory.parse(" dinner ")
        with self.assertRaises(ValidationError):
            MealCategory.parse("lunch\n")
        with self.assertRaises(ValidationError):
            DayOfWeek.parse(" Monday ")

    def test_labels_are_separate_from_storage_values(self):
        self.assertEqual(MealCategory.DINNER.value, "dinner")
        self.assertEqual(category_label(MealCategory.DINNER), "Dinner")
        self.assertEqual(day_label(DayOfWeek.parse("sunday")), "Sunday")

    def test_str(self):
        meal = Meal("dinner", "Pasta", ["Tomato", "Pasta"], meal_id=1)
        self.assertEqual(str(meal), "Name: Pasta\nIngredients:\nTomato\nPasta")
        self.assertEqual(meal.to_dict()["category"], "dinner")


class TestWeeklyPlan(unittest.TestCase):

    def test_slots_are_ordered_by_day_then_category(self):
        plan = WeeklyPlan([
            PlanSlot(DayOfWeek.TUESDAY, MealCategory.BREAKFAST, 1, "Omelette"),
            PlanSlot(DayOfWeek.MONDAY, MealCategory.DINNER, 2, "Pasta"),
            PlanSlot(DayOfWeek.MONDAY, MealCategory.BREAKFAST, 1, "Omelette"),
        ])
        self.assertEqual([s.key for s in plan], [
            (DayOfWeek.MONDAY, MealCategory.BREAKFAST),
            (DayOfWeek.MONDAY, MealCategory.DINNER),
            (DayOfWeek.TUESDAY, MealCategory.BREAKFAST),
        ])
        self.assertEqual(list(plan.by_day()), [DayOfWeek.MONDAY, DayOfWeek.TUESDAY])

    def test_same_key_replaces_slot(self):
        plan = WeeklyPlan()
        plan.add_slot(PlanSlot("Monday", "dinner", 1, "Pasta"))
        plan.add_slot(PlanSlot("Monday", "dinner", 2, "Soup"))
        self.assertEqual(len(plan), 1)
        self.assertEqual(plan.get("Monday", "dinner").meal_name, "Soup")
        self.assertEqual(str(plan.get("Monday", "dinner")), "Dinner: Soup")


if __name__ == '__main__':
    unittest.main()
