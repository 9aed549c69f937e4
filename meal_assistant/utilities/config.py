"""Configuration management for the Meal Plan Assistant."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Recipe catalog (JSON file); empty value means the bundled sample catalog
RECIPES_FILE: Final[str] = os.getenv('RECIPES_FILE', '')

# Planning defaults
DEFAULT_SERVINGS: Final[int] = int(os.getenv('DEFAULT_SERVINGS', '4'))
DEFAULT_FAVORITES_WEIGHT: Final[int] = int(os.getenv('DEFAULT_FAVORITES_WEIGHT', '50'))
ALTERNATIVES_LIMIT: Final[int] = int(os.getenv('ALTERNATIVES_LIMIT', '10'))

# Recent planning events kept in memory for the web layer
MAX_EVENTS: Final[int] = int(os.getenv('MAX_EVENTS', '200'))
