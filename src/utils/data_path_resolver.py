"""
Data path resolver for finding the station and fare data files.
"""
import os
from pathlib import Path

DATA_DIR_ENV_VAR = "METRO_DATA_DIR"


def get_data_directory() -> Path:
    """
    Get the data directory path.

    Returns:
        Path to the data directory
    """
    # Method 1: Explicit override
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override)

    # Method 2: Development environment - relative to this file
    # This file is in src/utils/, so data is at ../data/
    dev_data_dir = Path(__file__).parent.parent / "data"
    if dev_data_dir.exists():
        return dev_data_dir

    # Method 3: Check current working directory
    for location in (Path.cwd() / "src" / "data", Path.cwd() / "data"):
        if location.exists() and location.is_dir():
            return location.resolve()

    raise FileNotFoundError(
        "Could not find data directory. Searched in:\n" +
        f"- ${DATA_DIR_ENV_VAR}\n" +
        f"- Development path: {Path(__file__).parent.parent / 'data'}\n" +
        f"- Current directory: {Path.cwd()}\n" +
        "Please ensure the data directory exists in the expected location."
    )
