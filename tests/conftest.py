import json
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


REGISTRY_A_ROWS = [
    {"name": "Park", "institution": "행복복지관", "resignDate": "2024-01-01", "isActive": False},
    {"name": "Chio", "birthDate": "1990-01-01", "institution": "행복복지관", "isActive": True},
    {"name": "Lee", "birthDate": "900101", "institution": "희망센터", "isActive": True},
]

REGISTRY_B_ROWS = [
    {"name": "Park", "institution": "행복복지관", "resignDate": "2024-01-20", "status": "withdrawn"},
    {"name": "Choi", "birthDate": "1990-01-08", "institution": "행복복지관", "status": "normal"},
    {"name": "Lee", "birthDate": "19900101", "institution": "희망센터", "status": "정상"},
]


@pytest.fixture
def registry_files(tmp_path):
    """Two small registry exports on disk: (registry_a_path, registry_b_path)."""
    a_path = tmp_path / "employment.json"
    b_path = tmp_path / "training.json"
    a_path.write_text(json.dumps(REGISTRY_A_ROWS, ensure_ascii=False), encoding="utf-8")
    b_path.write_text(json.dumps({"records": REGISTRY_B_ROWS}, ensure_ascii=False), encoding="utf-8")
    return a_path, b_path
