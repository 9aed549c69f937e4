from pathlib import Path

from meal_assistant.utilities.config import RECIPES_FILE as _RECIPES_FILE_OVERRIDE

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
RECIPES_FILE = Path(_RECIPES_FILE_OVERRIDE) if _RECIPES_FILE_OVERRIDE else DATA_DIR / 'recipes.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE']
