from fastapi import FastAPI, Depends, HTTPException, Query

import logging
import random
from typing import Optional

from meal_assistant.api.routes import recipes
from meal_assistant.api.routes.recipes import get_recipe_repository
from meal_assistant.domain.MealPlanConfig import InvalidConfig
from meal_assistant.events.web_observers import start as start_event_observers, get_events as get_web_events
from meal_assistant.infra.Recipe_Repository import RecipeCatalogError
from meal_assistant.logic.planning.alternatives import find_alternative_recipes
from meal_assistant.logic.planning.engine import generate_meal_plan
from meal_assistant.utilities.validators import AlternativesRequest, GeneratePlanRequest

# Logging
logger = logging.getLogger("meal_assistant")

# Initialize FastAPI app
app = FastAPI(title="Meal Plan Assistant API")

# Include routers
app.include_router(recipes.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web alerts when the app starts."""
    start_event_observers()
    logger.info("Web observers for planning events started")


# -------------------- API: Meal plan generation --------------------
@app.post("/api/meal-plan/generate")
async def api_generate_meal_plan(payload: GeneratePlanRequest, repository=Depends(get_recipe_repository)):
    """Propose a recipe for every selected slot in the date range.

    Response JSON structure:
        {
          "proposed_meals": [ { id, date, slot_id, slot_name, recipe_id, recipe_title,
                                servings, match_type, matched_ingredients, matched_tags, ... } ],
          "ingredient_usage": [ { ingredient_id, ingredient_name, original_quantity,
                                  used_quantity, remaining_quantity, unit } ],
          "warnings": [ str ],
          "coverage": { total_slots, filled_slots, ingredient_matches, tag_matches, fallbacks, rejected }
        }
    """
    rng = random.Random(payload.seed) if payload.seed is not None else None
    try:
        plan = await generate_meal_plan(
            payload.config.to_domain(),
            [s.to_domain() for s in payload.meal_slots],
            payload.tag_names,
            catalog=repository,
            rng=rng,
            exclude_recipe_ids=payload.exclude_recipe_ids,
            existing_meals=[m.model_dump() for m in payload.existing_meals],
        )
    except InvalidConfig as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecipeCatalogError as e:
        logger.error("Recipe catalog unavailable: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    logger.info("Generated plan: %s/%s slots filled",
                plan.coverage.filled_slots, plan.coverage.total_slots)
    return plan.to_dict()


@app.post("/api/meal-plan/alternatives")
async def api_alternative_recipes(payload: AlternativesRequest, repository=Depends(get_recipe_repository)):
    """Recipes to swap in for a proposed meal, weekday tag matches first."""
    try:
        alternatives = await find_alternative_recipes(
            payload.current_recipe_id,
            payload.weekday,
            [r.to_domain() for r in payload.day_tag_rules],
            payload.used_recipe_ids,
            payload.limit,
            catalog=repository,
        )
    except RecipeCatalogError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"count": len(alternatives), "recipes": [r.to_dict() for r in alternatives]}


# -------------------- API: Planning events --------------------
@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None)):
    """Recent planning events (plan generated, pantry depleted) for polling clients."""
    return get_web_events(since)
