import json
import logging
import os
from dataclasses import asdict
from typing import Dict, Any

from withdrawal.backtest import StrategyConfig

logger = logging.getLogger(__name__)

DATA_FILE = "data/backtest_inputs.json"


def default_backtest_inputs() -> Dict[str, Any]:
    defaults = asdict(StrategyConfig())
    defaults["price_column"] = "High"
    return defaults


def load_backtest_inputs(filepath: str = DATA_FILE) -> Dict[str, Any]:
    """Loads backtest inputs from JSON file if exists, else returns defaults."""
    defaults = default_backtest_inputs()

    if os.path.exists(filepath):
        try:
            with open(filepath, "r") as f:
                data = json.load(f)
            saved_inputs = data.get("backtest_inputs", {})
            # Merge saved values with defaults (so new keys get default values)
            merged = defaults.copy()
            merged.update(saved_inputs)
            return merged
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Error loading backtest inputs from %s: %s", filepath, e)
    return defaults


def save_backtest_inputs(inputs: Dict[str, Any], filepath: str = DATA_FILE) -> None:
    """Saves backtest inputs to JSON file, preserving other data."""
    # Load existing data first
    existing_data = {}
    if os.path.exists(filepath):
        try:
            with open(filepath, "r") as f:
                existing_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Error loading existing data from %s: %s", filepath, e)

    existing_data["backtest_inputs"] = inputs

    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w") as f:
        json.dump(existing_data, f, indent=2)
