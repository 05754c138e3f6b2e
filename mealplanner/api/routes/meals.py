from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mealplanner.api.dependencies import get_catalog
from mealplanner.domain.Meal import MealCategory
from mealplanner.infra.Meal_Repository import Catalog

router = APIRouter(prefix="/api/meals", tags=["meals"])


class MealCreate(BaseModel):
    # Format rules are enforced by Catalog.add_meal so the API and the menu reject the same input
    category: str
    name: str
    ingredients: List[str]


@router.get("")
def list_meals(category: str = Query(...), catalog: Catalog = Depends(get_catalog)):
    category = MealCategory.parse(category)
    meals = catalog.list_meals(category)
    return {"category": category.value, "count": len(meals), "meals": [m.to_dict() for m in meals]}


@router.post("", status_code=201)
def add_meal(payload: MealCreate, catalog: Catalog = Depends(get_catalog)):
    meal = catalog.add_meal(payload.category, payload.name, payload.ingredients)
    return {"status": "success", "meal": meal.to_dict()}


@router.get("/resolve")
def resolve_meal(name: str = Query(...), category: str = Query(...),
                 catalog: Catalog = Depends(get_catalog)):
    meal_id = catalog.resolve_meal_id(name, category)
    if meal_id is None:
        return JSONResponse(status_code=404, content={"error": f"Meal {name!r} not found in {category}"})
    return {"meal_id": meal_id}


@router.get("/{meal_id}")
def get_meal(meal_id: int, catalog: Catalog = Depends(get_catalog)):
    return catalog.get_meal(meal_id).to_dict()


@router.get("/{meal_id}/ingredients")
def get_ingredients(meal_id: int, catalog: Catalog = Depends(get_catalog)):
    # raises NotFoundError for an unknown id instead of returning an empty list
    meal = catalog.get_meal(meal_id)
    return {"meal_id": meal_id, "ingredients": meal.ingredients}
