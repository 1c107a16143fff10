# krishi_analytics/__init__.py
"""
Predictive agronomic analytics: yield estimates, pest outbreak forecasts and
irrigation schedules for the farmer advisory dashboard.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
