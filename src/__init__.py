"""
Metro Journey Planner

Journey planning engine for a metro ticketing application.

Features:
- Route resolution across two lines joined at interchange stations
- Stop-count fare lookup and ticket quotes
- Estimated travel time
- JSON station catalog and fare rules
"""

__version__ = "1.0.0"
__author__ = "Metro Journey Planner Development Team"
__description__ = "Metro journey planner"
