"""
필터 적용 UseCase
"""

from typing import Iterable, Mapping, Sequence

from .base import BaseUseCase
from rocketlens.schemas.rocket import RocketListItem
from rocketlens.domain.filters import FilterEngine, FilterValueT


class FilterInput:
    """필터 UseCase 입력"""
    def __init__(
        self,
        rockets: Sequence[RocketListItem],
        selected_filters: Mapping[str, Iterable[FilterValueT]],
    ):
        self.rockets = rockets
        self.selected_filters = selected_filters


class ApplyRocketsFiltersUseCase(BaseUseCase[FilterInput, Sequence[RocketListItem]]):
    """
    필터 적용

    규칙 기반 FilterEngine으로 로켓 목록을 줄입니다.
    """

    name = "ApplyRocketsFiltersUseCase"

    def __init__(self):
        super().__init__()
        self.engine = FilterEngine()

    def _process(self, input_data: FilterInput) -> Sequence[RocketListItem]:
        return self.engine.apply(
            rockets=input_data.rockets,
            selected_filters=input_data.selected_filters,
        )
