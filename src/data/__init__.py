"""
Data package for the Metro Journey Planner.

This package contains the bundled JSON data files: the station catalog
(stations.json) and the fare rules (fareRules.json).
"""
