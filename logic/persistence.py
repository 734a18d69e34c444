import json
import logging
import os
from typing import Dict, Any

DATA_FILE = "data/calculator.json"

logger = logging.getLogger(__name__)

DEFAULT_INPUTS: Dict[str, Any] = {
    "initial_balance": 1000000.0,
    "annual_withdrawal": 40000.0,
    "years": 30,
    "inflation_rate": 2.5,
    "cash_allocation": 10.0,
    "safe_allocation": 40.0,
    "risky_allocation": 50.0,
    "safe_growth_rate": 4.0,
    "dynamic_adjustment": 20.0,
}


def load_calculator_inputs(filepath: str = DATA_FILE) -> Dict[str, Any]:
    """Loads calculator inputs from JSON file if exists, else returns defaults."""
    merged = DEFAULT_INPUTS.copy()
    if os.path.exists(filepath):
        try:
            with open(filepath, "r") as f:
                data = json.load(f)
                saved_inputs = data.get("calculator_inputs", {})
                # Merge saved values with defaults (so new keys get default values)
                merged.update({k: v for k, v in saved_inputs.items() if k in DEFAULT_INPUTS})
        except (OSError, ValueError, AttributeError) as e:
            logger.error("Error loading calculator inputs from %s: %s", filepath, e)
    return merged


def save_calculator_inputs(inputs: Dict[str, Any], filepath: str = DATA_FILE) -> None:
    """Saves calculator inputs to JSON file, preserving other data."""
    # Load existing data first
    existing_data = {}
    if os.path.exists(filepath):
        try:
            with open(filepath, "r") as f:
                existing_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", filepath, e)
    if not isinstance(existing_data, dict):
        existing_data = {}

    existing_data["calculator_inputs"] = inputs

    # Ensure directory exists
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    try:
        with open(filepath, "w") as f:
            json.dump(existing_data, f, indent=2)
    except OSError as e:
        logger.error("Error saving calculator inputs to %s: %s", filepath, e)
        raise
