# krishi_analytics/core/exceptions.py
"""
Custom exceptions for the analytics backend
"""

class KrishiAnalyticsError(Exception):
    """Base exception for the analytics backend"""
    pass

class AgentError(KrishiAnalyticsError):
    """Agent-related errors"""
    pass

class AgentConfigError(KrishiAnalyticsError):
    """Agent configuration errors"""
    pass

class AnalyticsError(KrishiAnalyticsError):
    """A predictor could not produce a result"""
    pass

class InsufficientDataError(AnalyticsError):
    """A statistic was requested over an empty series"""
    pass

class PredictionError(AnalyticsError):
    """Unexpected failure inside a predictor"""
    pass

