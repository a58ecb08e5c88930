"""
Version information for the Metro Journey Planner.

Centralized version management for the application and its packaging.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "MetroPlanner"
__app_display_name__ = "Metro Journey Planner"
__description__ = "Metro ticketing journey planner: routes, fares and travel times"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_display_name__} ({__app_name__} v{__version__})"
