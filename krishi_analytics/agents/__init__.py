# krishi_analytics/agents/__init__.py
"""
Predictive analytics agents
"""
