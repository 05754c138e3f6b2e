"""Meal domain entity: category, name, ordered ingredient names and the generated id."""
from enum import Enum
from typing import Dict, List, Optional, Union

from mealplanner.domain.Errors import ValidationError


class MealCategory(str, Enum):
    # value doubles as the storage key
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @classmethod
    def parse(cls, value: Union[str, "MealCategory"]) -> "MealCategory":
        '''Accepts an enum member or any casing of its value ("Dinner", "DINNER").'''
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError(
                f"Wrong meal category! Choose from: {', '.join(c.value for c in cls)}."
            ) from None


def category_label(category: MealCategory) -> str:
    """Display label for a category ("breakfast" -> "Breakfast")."""
    return category.value.capitalize()


class Meal:
    def __init__(self, category: MealCategory, name: str, ingredients: Optional[List[str]] = None,
                 meal_id: Optional[int] = None):
        self.category = MealCategory.parse(category)
        self.name = name
        self.ingredients = list(ingredients) if ingredients else []
        self.meal_id = meal_id

    def __str__(self) -> str:
        ingredients_str = "\n".join(self.ingredients)
        return f"Name: {self.name}\nIngredients:\n{ingredients_str}"

    def __repr__(self) -> str:
        return f"Meal(meal_id={self.meal_id!r}, category={self.category.value!r}, name={self.name!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return (self.meal_id, self.category, self.name, self.ingredients) == \
            (other.meal_id, other.category, other.name, other.ingredients)

    def to_dict(self) -> Dict:
        return {
            "meal_id": self.meal_id,
            "category": self.category.value,
            "name": self.name,
            "ingredients": list(self.ingredients),
        }
