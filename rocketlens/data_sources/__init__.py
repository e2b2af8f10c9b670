"""
데이터 소스 모듈
"""

from .spacex_api import SpaceXClient, SpaceXApiError
from .cache_manager import CacheManager, get_cache_manager
from .rockets_repository import RocketsRepository, RocketsFetchError, RocketNotFoundError
from .crew_repository import CrewRepository, CrewFetchError

__all__ = [
    "SpaceXClient",
    "SpaceXApiError",
    "CacheManager",
    "get_cache_manager",
    "RocketsRepository",
    "RocketsFetchError",
    "RocketNotFoundError",
    "CrewRepository",
    "CrewFetchError",
]
