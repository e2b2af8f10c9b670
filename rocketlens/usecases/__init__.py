"""
RocketLens UseCase 패키지
각 UseCase는 단일 책임을 가지며, 정해진 입출력 타입을 따릅니다.
"""

from .base import BaseUseCase
from .get_rockets_list import GetRocketsListUseCase
from .get_rocket_detail import GetRocketDetailUseCase
from .get_crew_list import GetCrewListUseCase
from .apply_search import ApplyRocketsSearchUseCase, SearchInput
from .apply_filters import ApplyRocketsFiltersUseCase, FilterInput

__all__ = [
    "BaseUseCase",
    "GetRocketsListUseCase",
    "GetRocketDetailUseCase",
    "GetCrewListUseCase",
    "ApplyRocketsSearchUseCase",
    "SearchInput",
    "ApplyRocketsFiltersUseCase",
    "FilterInput",
]
