"""
Constants and default values used when presenting models.
"""

UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
