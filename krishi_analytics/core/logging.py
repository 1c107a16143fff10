# krishi_analytics/core/logging.py
"""
Logging configuration for the backend
"""
import logging
import sys
from .config import get_settings

def setup_logging():
    """Setup logging configuration"""
    settings = get_settings()
    level = getattr(logging, settings.log_level.value)

    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    # Agents log under "agents.<name>", services under their module path
    for name in ("agents", "krishi_analytics"):
        logging.getLogger(name).setLevel(level)
