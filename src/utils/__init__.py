"""
Utility functions for the Metro Journey Planner.

This module contains helper functions and utilities used throughout
the application.
"""

from .helpers import format_duration, format_fare

__all__ = ["format_duration", "format_fare"]
