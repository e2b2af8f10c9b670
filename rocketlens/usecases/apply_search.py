"""
검색 적용 UseCase
"""

from typing import Sequence

from .base import BaseUseCase
from rocketlens.schemas.rocket import RocketListItem
from rocketlens.domain.search import SearchEngine


class SearchInput:
    """검색 UseCase 입력"""
    def __init__(self, rockets: Sequence[RocketListItem], query: str):
        self.rockets = rockets
        self.query = query


class ApplyRocketsSearchUseCase(BaseUseCase[SearchInput, Sequence[RocketListItem]]):
    """이름 검색 (SearchEngine 사용)"""

    name = "ApplyRocketsSearchUseCase"

    def __init__(self):
        super().__init__()
        self.engine = SearchEngine()

    def _process(self, input_data: SearchInput) -> Sequence[RocketListItem]:
        return self.engine.search(input_data.rockets, input_data.query)
