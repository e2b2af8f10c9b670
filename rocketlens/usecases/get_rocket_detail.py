"""
로켓 상세 조회 UseCase
"""

from typing import Optional

from .base import BaseUseCase
from rocketlens.schemas.rocket import RocketDetail
from rocketlens.data_sources.rockets_repository import RocketsRepository


class GetRocketDetailUseCase(BaseUseCase[str, RocketDetail]):
    """
    로켓 상세 조회

    입력은 로켓 ID입니다.
    실패 시 RocketsFetchError(없는 ID는 RocketNotFoundError)가 그대로 전달됩니다.
    """

    name = "GetRocketDetailUseCase"

    def __init__(self, repository: Optional[RocketsRepository] = None):
        super().__init__()
        self.repository = repository or RocketsRepository()

    def _validate_input(self, rocket_id: str) -> None:
        super()._validate_input(rocket_id)
        if not rocket_id.strip():
            raise ValueError(f"{self.name}: 로켓 ID가 비어 있습니다.")

    def _process(self, rocket_id: str) -> RocketDetail:
        return self.repository.get_rocket_detail(rocket_id)
