from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from mealplanner.api.dependencies import get_planner
from mealplanner.infra.Plan_Repository import Planner, format_plan
from mealplanner.infra.pdf_utils import generate_pdf_for_plan
from mealplanner.utilities.validators import validate_assignment

router = APIRouter(prefix="/api/plan", tags=["plan"])


class SlotUpdate(BaseModel):
    meal_id: int


@router.get("")
def get_plan(planner: Planner = Depends(get_planner)):
    plan = planner.current_plan()
    return {
        "count": len(plan),
        "days": plan.to_dict(),
        "slots": [slot.to_dict() for slot in plan],
    }


@router.get("/text", response_class=Response)
def get_plan_text(planner: Planner = Depends(get_planner)):
    """The weekly plan exactly as the text menu prints it."""
    lines = format_plan(planner.current_plan())
    return Response(content="\n".join(lines), media_type="text/plain")


@router.get("/pdf")
def get_plan_pdf(planner: Planner = Depends(get_planner)):
    pdf_bytes = generate_pdf_for_plan(planner.current_plan())
    headers = {"Content-Disposition": "inline; filename=meal_plan.pdf"}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)


@router.put("/{day}/{category}")
def assign_slot(day: str, category: str, payload: SlotUpdate, planner: Planner = Depends(get_planner)):
    data = validate_assignment(day, category, payload.meal_id)
    planner.assign(data.day, data.category, data.meal_id)
    slot = planner.current_plan().get(data.day, data.category)
    return {"status": "success", "slot": slot.to_dict()}
