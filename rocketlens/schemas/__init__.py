"""
RocketLens 스키마 패키지
도메인 모델, 필터 값, 화면 상태를 정의합니다.
"""

from .text import TextHandle
from .rocket import RocketListItem, RocketDto, RocketDetail, StageDetail, format_first_flight
from .crew import CrewListItem, CrewDto
from .filters import (
    FilterKey,
    PARAM_UNIT,
    ExactMatch,
    Range,
    YearRange,
    FilterValue,
    FilterItem,
    FilterState,
    RangeInfo,
    YearRangeInfo,
)
from .state import RocketsListState, RocketDetailState

__all__ = [
    "TextHandle",
    "RocketListItem",
    "RocketDto",
    "RocketDetail",
    "StageDetail",
    "CrewListItem",
    "CrewDto",
    "format_first_flight",
    "FilterKey",
    "PARAM_UNIT",
    "ExactMatch",
    "Range",
    "YearRange",
    "FilterValue",
    "FilterItem",
    "FilterState",
    "RangeInfo",
    "YearRangeInfo",
    "RocketsListState",
    "RocketDetailState",
]
