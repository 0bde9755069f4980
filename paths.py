# paths.py

from pathlib import Path

# Project root (this file lives in the root directory)
ROOT = Path(__file__).parent

# Data directory for the default SQLite database
DATA_DIR = ROOT / "Data"

def data_file(filename: str) -> Path:
    return DATA_DIR / filename
