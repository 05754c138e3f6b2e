import pytest

from mealplanner.domain.Errors import ValidationError
from mealplanner.domain.Meal import MealCategory
from mealplanner.domain.Plan import DayOfWeek
from mealplanner.utilities.validators import is_valid_name, validate_assignment, validate_meal, SaveInput


@pytest.mark.parametrize("value", ["Pasta", "Red Beans"])
def test_accepts_letters_and_spaces(value):
    assert is_valid_name(value)


@pytest.mark.parametrize("value", ["", "Pasta2", "Mac & Cheese", "Pasta!", "Red-Beans", "Egg\n", "Pasta\n", "\nPasta"])
def test_rejects_empty_digits_and_punctuation(value):
    assert not is_valid_name(value)


def test_validate_meal_rejects_bad_ingredient():
    with pytest.raises(ValidationError) as exc:
        validate_meal("dinner", "Pasta", ["Tomato", "Salt3"])
    assert "letters only" in str(exc.value)


def test_validate_meal_rejects_empty_ingredient_list():
    with pytest.raises(ValidationError):
        validate_meal("dinner", "Pasta", [])


def test_validate_meal_parses_category():
    data = validate_meal("Dinner", "Pasta", ["Tomato"])
    assert data.category is MealCategory.DINNER


def test_validate_assignment():
    data = validate_assignment("monday", "LUNCH", 3)
    assert (data.day, data.category, data.meal_id) == (DayOfWeek.MONDAY, MealCategory.LUNCH, 3)
    with pytest.raises(ValidationError):
        validate_assignment("Someday", "lunch", 3)
    with pytest.raises(ValidationError):
        validate_assignment("Monday", "lunch", 0)


def test_save_input_rejects_blank_filename():
    assert SaveInput(filename=" list.txt ").filename == "list.txt"
    with pytest.raises(Exception):
        SaveInput(filename="   ")


def test_long_names_are_accepted():
    long_name = "A" * 101
    assert is_valid_name(long_name)
    data = validate_meal("dinner", long_name, ["B" * 150])
    assert data.name == long_name


def test_trailing_newline_is_rejected_for_name_and_ingredients():
    with pytest.raises(ValidationError):
        validate_meal("breakfast", "Omelette\n", ["Egg"])
    with pytest.raises(ValidationError):
        validate_meal("breakfast", "Omelette", ["Egg\n", "Egg"])
