from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from mealplanner.api.dependencies import get_aggregator, get_planner
from mealplanner.infra.Plan_Repository import Planner
from mealplanner.infra.file_utils import save_lines
from mealplanner.logic.shopping.list_builder import Aggregator
from mealplanner.utilities.constants import EMPTY_PLAN_MESSAGE
from mealplanner.utilities.validators import SaveInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


@router.get("")
def get_shopping_list(planner: Planner = Depends(get_planner),
                      aggregator: Aggregator = Depends(get_aggregator)):
    shopping_list = aggregator.build_shopping_list(planner.current_plan())
    return {
        "items": shopping_list.to_dict(),
        "lines": aggregator.render(shopping_list),
        "count": len(shopping_list),
        "total": shopping_list.total(),
    }


@router.post("/save")
def save_shopping_list(payload: SaveInput, request: Request,
                       planner: Planner = Depends(get_planner),
                       aggregator: Aggregator = Depends(get_aggregator)):
    plan = planner.current_plan()
    if plan.is_empty():
        return JSONResponse(status_code=400, content={"error": EMPTY_PLAN_MESSAGE})
    lines = aggregator.render(aggregator.build_shopping_list(plan))
    # Only the file name is honoured; files always land in the export directory
    target = Path(request.app.state.export_dir) / Path(payload.filename).name
    save_lines(target, lines)
    return {"status": "saved", "filename": target.name, "lines": len(lines)}
