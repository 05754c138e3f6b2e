"""
Input validation schemas using Pydantic for meal, plan and shopping list input.
"""
import re
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from mealplanner.domain.Errors import ValidationError
from mealplanner.domain.Meal import MealCategory
from mealplanner.domain.Plan import DayOfWeek
from mealplanner.utilities.constants import NAME_PATTERN, WRONG_FORMAT_MESSAGE

_NAME_RE = re.compile(NAME_PATTERN)


def is_valid_name(value) -> bool:
    """True for a non-empty string made of letters and spaces only."""
    return isinstance(value, str) and bool(_NAME_RE.fullmatch(value))


class MealInput(BaseModel):
    """Schema for a new meal: category, name and ingredient names."""
    category: MealCategory
    name: str = Field(..., min_length=1)
    ingredients: List[str] = Field(..., min_length=1)

    @field_validator('category', mode='before')
    @classmethod
    def parse_category(cls, v):
        return MealCategory.parse(v)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not is_valid_name(v):
            raise ValueError(WRONG_FORMAT_MESSAGE)
        return v

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Every ingredient must pass the same letters-and-spaces rule as the name."""
        for ingredient in v:
            if not is_valid_name(ingredient):
                raise ValueError(WRONG_FORMAT_MESSAGE)
        return v


class PlanAssignInput(BaseModel):
    """Schema for assigning a meal to a (day, category) slot."""
    day: DayOfWeek
    category: MealCategory
    meal_id: int = Field(..., ge=1)

    @field_validator('day', mode='before')
    @classmethod
    def parse_day(cls, v):
        return DayOfWeek.parse(v)

    @field_validator('category', mode='before')
    @classmethod
    def parse_category(cls, v):
        return MealCategory.parse(v)


class SaveInput(BaseModel):
    """Schema for saving the shopping list to a file."""
    filename: str = Field(..., min_length=1, max_length=255)

    @field_validator('filename')
    @classmethod
    def strip_whitespace(cls, v):
        v = v.strip()
        if not v or v in ('.', '..') or v.endswith(('/', '\\')):
            raise ValueError('Filename cannot be empty')
        return v


def _first_error(exc: PydanticValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", "invalid input")
    # pydantic prefixes messages raised from validators
    msg = msg.replace("Value error, ", "")
    return f"{loc}: {msg}" if loc else msg


def validate_meal(category, name, ingredients) -> MealInput:
    """Validate raw meal input, raising the planner's ValidationError on failure."""
    try:
        return MealInput(category=category, name=name, ingredients=list(ingredients or []))
    except PydanticValidationError as e:
        raise ValidationError(_first_error(e)) from e


def validate_assignment(day, category, meal_id) -> PlanAssignInput:
    try:
        return PlanAssignInput(day=day, category=category, meal_id=meal_id)
    except PydanticValidationError as e:
        raise ValidationError(_first_error(e)) from e
