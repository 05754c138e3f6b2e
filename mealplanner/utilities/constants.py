from typing import Final

# Letters and spaces only, at least one character (meal names and ingredient names)
NAME_PATTERN: Final[str] = r"^[A-Za-z ]+$"

MEALS_TABLE: Final[str] = "meals"
INGREDIENTS_TABLE: Final[str] = "ingredients"
PLANS_TABLE: Final[str] = "plan"

INGREDIENT_SEPARATOR: Final[str] = ","

# Messages printed by the text menu
WRONG_FORMAT_MESSAGE: Final[str] = "Wrong format. Use letters only!"
MEAL_NOT_FOUND_MESSAGE: Final[str] = "This meal doesn't exist. Choose a meal from the list above."
EMPTY_PLAN_MESSAGE: Final[str] = "Unable to save. Plan your meals first."
