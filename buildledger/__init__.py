"""
BuildLedger

Construction payment tracking: expense breakdowns per material and project,
and the interactive donut chart engine used by the reporting views.
"""

__version__ = "0.1.0"
