from fastapi import APIRouter, Depends, HTTPException

from meal_assistant.infra.Recipe_Repository import JsonRecipeRepository, RecipeCatalogError

router = APIRouter(prefix="/api/recipes", tags=["recipes"])

_repository = JsonRecipeRepository()


def get_recipe_repository():
    """Catalog used by the planning endpoints (overridden in tests)."""
    return _repository


async def load_recipes(repository):
    try:
        return await repository.get_all()
    except RecipeCatalogError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("")
async def list_recipes(repository=Depends(get_recipe_repository)):
    """Return the recipe catalog the planner works from."""
    recipes = await load_recipes(repository)
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}
