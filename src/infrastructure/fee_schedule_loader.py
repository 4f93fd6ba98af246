"""
Load and validate raw network fee schedules from JSON files.
"""

import json
from pathlib import Path
from typing import Any

from src.application.services.fee_schedule import validate_fee_schedule
from src.domain.errors import FeeScheduleConfigError
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


def load_fee_schedule(path: str) -> dict[str, Any]:
    """
    Read a fee schedule file and validate it.
    
    Args:
        path: JSON file shaped like {"default": {"gasLimit": {...}, "gasPrice": {...}}, ...}
        
    Returns:
        Raw fee schedule.
        
    Raises:
        FeeScheduleConfigError: If the file is missing, not JSON, or incomplete.
    """
    file_path = Path(path)
    try:
        with open(file_path, "r") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise FeeScheduleConfigError(f"Fee schedule file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        raise FeeScheduleConfigError(f"Fee schedule file is not valid JSON: {e}") from e
    
    validate_fee_schedule(raw)
    logger.info("loaded_fee_schedule", path=str(file_path), networks=len(raw))
    return raw
