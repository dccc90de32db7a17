from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from roster_reconciler.core.exceptions import RegistryLoadError
from roster_reconciler.logging import get_logger

log = get_logger("loader")


def load_registry_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read one registry export from disk.

    Accepted shapes: a JSON array of row objects, or an object whose
    ``records`` key holds that array.
    """
    path = Path(path)
    if not path.exists():
        raise RegistryLoadError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise RegistryLoadError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RegistryLoadError(f"Malformed JSON in {path}: {exc}") from exc

    if isinstance(data, dict) and "records" in data:
        data = data["records"]

    if not isinstance(data, list):
        raise RegistryLoadError(
            f"{path}: expected a JSON array of records, got {type(data).__name__}"
        )

    log.info("Loaded registry file: %s (%d rows)", path, len(data))
    return data
