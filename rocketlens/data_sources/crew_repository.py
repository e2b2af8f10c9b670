"""
크루 저장소
"""

from typing import Callable, Optional
from loguru import logger
from pydantic import ValidationError

from rocketlens.schemas.crew import CrewListItem
from .cache_manager import CacheManager, get_cache_manager
from .spacex_api import SpaceXApiError, SpaceXClient

CREW_CACHE_PARAMS = {"resource": "crew", "version": "v4"}


class CrewFetchError(Exception):
    """크루 목록을 가져오지 못함"""
    pass


class CrewRepository:
    """크루 목록 저장소 (캐시 우선, refresh=True면 API 재조회)"""

    def __init__(
        self,
        client_factory: Callable[[], SpaceXClient] = SpaceXClient,
        cache: Optional[CacheManager] = None,
    ):
        self.client_factory = client_factory
        self.cache = cache or get_cache_manager()
        self.logger = logger.bind(source="CrewRepository")

    def get_crew(self, refresh: bool = False) -> list[CrewListItem]:
        """
        크루 목록 조회

        Raises:
            CrewFetchError: API 호출 실패
        """
        if not refresh:
            cached = self._get_cached_crew()
            if cached:
                return cached

        try:
            with self.client_factory() as client:
                dtos = client.get_crew()
        except SpaceXApiError as e:
            self.logger.error(f"Crew fetch failed: {e}")
            raise CrewFetchError(str(e)) from e

        crew = [dto.to_list_item() for dto in dtos]
        self.cache.set(CREW_CACHE_PARAMS, [member.model_dump(mode="json") for member in crew])
        return crew

    def _get_cached_crew(self) -> list[CrewListItem]:
        data = self.cache.get(CREW_CACHE_PARAMS)
        if not data:
            return []

        try:
            return [CrewListItem.model_validate(item) for item in data]
        except (ValidationError, TypeError) as e:
            self.logger.warning(f"Invalid cached crew: {e}")
            return []
