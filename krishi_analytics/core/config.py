# krishi_analytics/core/config.py
"""
Configuration management for the analytics backend
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Dict, Any
from functools import lru_cache
from enum import Enum
from dotenv import load_dotenv
load_dotenv()

class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

class Settings(BaseSettings):
    """Application settings with validation"""

    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True

    # API Configuration
    api_title: str = "KrishiMitra Predictive Analytics"
    api_version: str = "1.0.0"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:4173"
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Cache Configuration
    cache_enabled: bool = True
    cache_default_ttl: int = 900  # 15 minutes
    cache_max_size: int = 1000

    # Agent Configurations
    yield_config: Dict[str, Any] = {
        "default_area_hectares": 1.0,
        "cache_ttl_seconds": 900,
    }

    pest_config: Dict[str, Any] = {
        "cache_ttl_seconds": 600,
    }

    irrigation_config: Dict[str, Any] = {
        "cache_ttl_seconds": 600,
    }

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    def get_agent_config(self, agent_name: str) -> Dict[str, Any]:
        """Get configuration for specific agent"""
        config_map = {
            "yield": self.yield_config,
            "pests": self.pest_config,
            "irrigation": self.irrigation_config
        }
        return config_map.get(agent_name, {})

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
