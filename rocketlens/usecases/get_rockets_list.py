"""
로켓 목록 조회 UseCase
"""

from typing import Optional

from .base import BaseUseCase
from rocketlens.schemas.rocket import RocketListItem
from rocketlens.data_sources.rockets_repository import RocketsRepository


class GetRocketsListUseCase(BaseUseCase[bool, list[RocketListItem]]):
    """
    로켓 목록 조회

    입력은 새로고침 여부(refresh)입니다.
    실패 시 RocketsFetchError가 그대로 전달됩니다.
    """

    name = "GetRocketsListUseCase"

    def __init__(self, repository: Optional[RocketsRepository] = None):
        super().__init__()
        self.repository = repository or RocketsRepository()

    def _process(self, refresh: bool) -> list[RocketListItem]:
        return self.repository.get_rockets_list(refresh=refresh)
