from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional


@dataclass
class ReconcileContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    registry_a_path: Optional[str] = None
    registry_b_path: Optional[str] = None
    output_path: Optional[str] = None

    as_of: Optional[date] = None
    pretty: bool = False

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: list = field(default_factory=list)

    debug: bool = False
