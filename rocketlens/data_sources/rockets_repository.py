"""
로켓 저장소
캐시를 먼저 확인하고, 없거나 새로고침이면 SpaceX API에서 가져옵니다.
"""

from typing import Callable, Optional
from loguru import logger
from pydantic import ValidationError

from rocketlens.schemas.rocket import RocketDetail, RocketListItem
from .cache_manager import CacheManager, get_cache_manager
from .spacex_api import SpaceXApiError, SpaceXClient

ROCKETS_CACHE_PARAMS = {"resource": "rockets", "version": "v4"}


class RocketsFetchError(Exception):
    """로켓 데이터를 가져오지 못함"""
    pass


class RocketNotFoundError(RocketsFetchError):
    """해당 ID의 로켓이 없음 (HTTP 404)"""
    pass


class RocketsRepository:
    """
    로켓 목록 저장소

    - refresh=False: 캐시에 데이터가 있으면 캐시 반환
    - refresh=True 또는 캐시 없음: API 호출 후 캐시에 저장
    - 상세 정보는 캐시하지 않고 매번 API에서 조회
    """

    def __init__(
        self,
        client_factory: Callable[[], SpaceXClient] = SpaceXClient,
        cache: Optional[CacheManager] = None,
    ):
        self.client_factory = client_factory
        self.cache = cache or get_cache_manager()
        self.logger = logger.bind(source="RocketsRepository")

    def get_rockets_list(self, refresh: bool = False) -> list[RocketListItem]:
        """
        로켓 목록 조회

        Raises:
            RocketsFetchError: API 호출 실패
        """
        if not refresh:
            cached = self._get_cached_rockets()
            if cached:
                return cached

        try:
            with self.client_factory() as client:
                dtos = client.get_rockets()
        except SpaceXApiError as e:
            self.logger.error(f"Rockets fetch failed: {e}")
            raise RocketsFetchError(str(e)) from e

        rockets = [dto.to_list_item() for dto in dtos]
        self._save_rockets_to_cache(rockets)
        return rockets

    def _get_cached_rockets(self) -> list[RocketListItem]:
        data = self.cache.get(ROCKETS_CACHE_PARAMS)
        if not data:
            return []

        try:
            return [RocketListItem.model_validate(item) for item in data]
        except (ValidationError, TypeError) as e:
            # 손상된 캐시는 없는 것으로 처리
            self.logger.warning(f"Invalid cached rockets: {e}")
            return []

    def _save_rockets_to_cache(self, rockets: list[RocketListItem]):
        self.cache.set(
            ROCKETS_CACHE_PARAMS,
            [rocket.model_dump(mode="json") for rocket in rockets],
        )

    def get_rocket_detail(self, rocket_id: str) -> RocketDetail:
        """
        로켓 상세 조회

        Raises:
            RocketNotFoundError: 없는 ID
            RocketsFetchError: API 호출 실패
        """
        try:
            with self.client_factory() as client:
                dto = client.get_rocket(rocket_id)
        except SpaceXApiError as e:
            if e.status_code == 404:
                self.logger.warning(f"Rocket not found: {rocket_id}")
                raise RocketNotFoundError(f"로켓을 찾을 수 없습니다: {rocket_id}") from e
            self.logger.error(f"Rocket detail fetch failed: {e}")
            raise RocketsFetchError(str(e)) from e

        return dto.to_detail()
