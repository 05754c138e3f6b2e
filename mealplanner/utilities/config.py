"""Configuration management for the Meal Planner application."""
import os
from typing import Final
from pathlib import Path

# Load environment variables from .env file if it exists
from dotenv import load_dotenv

env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Storage
MEALS_DB_PATH: Final[str] = os.getenv('MEALS_DB_PATH', 'meals.db')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'WARNING').upper()

# Directory the API writes shopping list files into
EXPORT_DIR: Final[str] = os.getenv('EXPORT_DIR', '.')
