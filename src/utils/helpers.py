"""
Helper utility functions for the Metro Journey Planner.

This module contains formatting helpers for durations and fares.
"""


def format_duration(total_minutes: int) -> str:
    """
    Format a number of minutes as a human-readable duration.

    Args:
        total_minutes: Duration in whole minutes

    Returns:
        str: Formatted duration string (e.g., "1h 30m", "45m")
    """
    hours = total_minutes // 60
    minutes = total_minutes % 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    else:
        return f"{minutes}m"


def format_fare(fare: int, currency: str = "₹") -> str:
    """
    Format a fare for display.

    Args:
        fare: Fare amount, negative when no fare applies
        currency: Currency symbol prefix

    Returns:
        str: Formatted fare, or "not available" for a negative fare
    """
    if fare < 0:
        return "not available"
    return f"{currency}{fare}"
