"""Shopping list builder.

Aggregator walks every slot of a WeeklyPlan, looks up the slot's meal
ingredients in the Catalog and counts each occurrence. The result depends
only on which meals are planned, not on slot order.
"""
from typing import Dict, List

from mealplanner.domain.Plan import WeeklyPlan
from mealplanner.domain.ShoppingList import ShoppingList
from mealplanner.infra.Meal_Repository import Catalog


def format_item(name: str, count: int) -> str:
    return f"{name} x{count}" if count > 1 else name


class Aggregator:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def build_shopping_list(self, plan: WeeklyPlan) -> ShoppingList:
        """Count ingredient occurrences across all planned meals.

        Args:
            plan: WeeklyPlan as returned by Planner.current_plan().

        Returns:
            ShoppingList; empty when the plan has no slots.
        """
        shopping_list = ShoppingList()
        ingredients_by_meal: Dict[int, List[str]] = {}
        for slot in plan:
            if slot.meal_id not in ingredients_by_meal:
                ingredients_by_meal[slot.meal_id] = self.catalog.get_ingredients(slot.meal_id)
            for ingredient in ingredients_by_meal[slot.meal_id]:
                shopping_list.add_item(ingredient)
        return shopping_list

    @staticmethod
    def render(shopping_list: ShoppingList) -> List[str]:
        '''One line per ingredient, alphabetical: "Egg x2" or just "Tomato" for a single use.'''
        return [format_item(name, count) for name, count in shopping_list.get_items()]


__all__ = ['Aggregator', 'format_item']
