"""
Settings Module for Unblock Jam Solver

Provides persistent storage for search preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from unblock_jam.solver import ExitPolicy, SearchLimits, SuccessorMode

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "bfs",
    "bfs_max_iterations": 30000,
    "dfs_max_iterations": 200000,
    "checkpoint_interval": 1000,
    "exit_policy": ExitPolicy.ANY_CELL.value,
    "successor_mode": SuccessorMode.UNIT_STEP.value,
}


def load_settings(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Read the settings file, filling any missing key from DEFAULT_SETTINGS.

    Args:
        path: Settings file (default SETTINGS_FILE)

    Returns:
        Settings dictionary (plain defaults when the file is absent or unreadable)
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Union[str, Path, None] = None) -> None:
    """
    Write settings as indented JSON. Failures are logged, not raised.

    Args:
        settings: Settings dictionary
        path: Settings file (default SETTINGS_FILE)
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def limits_from_settings(settings: Dict[str, Any],
                         strategy_name: Optional[str] = None) -> SearchLimits:
    """
    Build search limits for a strategy.

    BFS and DFS have separate iteration budgets; other strategies fall
    back to their own class default.

    Args:
        settings: Settings dictionary
        strategy_name: Strategy the limits are for (default: settings' strategy)

    Returns:
        SearchLimits instance
    """
    strategy_name = strategy_name or settings.get("strategy_name", DEFAULT_SETTINGS["strategy_name"])
    return SearchLimits(
        max_iterations=settings.get(f"{strategy_name}_max_iterations"),
        checkpoint_interval=settings.get("checkpoint_interval", DEFAULT_SETTINGS["checkpoint_interval"]),
    )


def strategy_kwargs_from_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build strategy constructor arguments from settings.

    Raises:
        ValueError: If exit_policy or successor_mode is not a known value
    """
    return {
        "exit_policy": ExitPolicy(settings.get("exit_policy", DEFAULT_SETTINGS["exit_policy"])),
        "successor_mode": SuccessorMode(settings.get("successor_mode", DEFAULT_SETTINGS["successor_mode"])),
    }
