"""Recipe catalog accessors.

The planner only needs `await catalog.get_all()`; any object providing it
can stand in for these repositories.
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from meal_assistant.domain.Recipe import Recipe
from meal_assistant.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeCatalogError(RuntimeError):
    """The recipe catalog exists but could not be read."""


def reading_from_recipes(path: Union[str, Path, None] = None) -> List[Recipe]:
    """Read recipes from a JSON file (a list, or {"recipes": [...]})."""
    path = Path(path) if path else RECIPES_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Recipes file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in recipes file {path}: {e}")
        raise RecipeCatalogError(f"Invalid JSON in recipes file {path}: {e}") from e
    if isinstance(recipes_data, dict):
        recipes_data = recipes_data.get("recipes", [])
    return [Recipe.from_dict(entry) for entry in recipes_data]


class JsonRecipeRepository:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path else RECIPES_FILE

    async def get_all(self) -> List[Recipe]:
        return await asyncio.to_thread(reading_from_recipes, self.path)

    def __repr__(self) -> str:
        return f"JsonRecipeRepository({str(self.path)!r})"


class InMemoryRecipeRepository:
    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self.recipes: List[Recipe] = list(recipes or [])

    async def get_all(self) -> List[Recipe]:
        return list(self.recipes)
