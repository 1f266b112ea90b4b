# catalog/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Export file loaded at startup; leave unset to start with an empty catalog
CATALOG_EXPORT_PATH = os.getenv("CATALOG_EXPORT_PATH") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# The only canonical field with a non-absence default
TITLE_FALLBACK = "Unknown Title"
