# krishi_analytics/core/cache.py
"""
Caching utilities
"""
from typing import Any, Optional, Dict
from cachetools import TTLCache

class CacheManager:
    """In-memory TTL cache for agent responses"""
    
    def __init__(self, max_size: int = 1000, ttl: int = 900):
        self._cache: Dict[str, Any] = TTLCache(maxsize=max_size, ttl=ttl)
    
    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache"""
        return self._cache.get(key)
    
    async def set(self, key: str, value: Any) -> None:
        """Set value in cache"""
        # TTLCache applies one TTL to every entry
        self._cache[key] = value

    def __len__(self) -> int:
        return len(self._cache)
