"""
화면 상태 파이프라인
"""

from .rockets_list import (
    RocketsListViewModel,
    RocketsListIntent,
    LoadRockets,
    RefreshRockets,
    RetryLoadRockets,
    SearchQueryChanged,
    FilterChipToggled,
    RocketClicked,
    RocketDetailsClosed,
    ConsumeError,
)
from .rocket_detail import (
    RocketDetailViewModel,
    RocketDetailIntent,
    LoadRocketDetail,
    ConsumeDetailError,
)

__all__ = [
    "RocketsListViewModel",
    "RocketsListIntent",
    "LoadRockets",
    "RefreshRockets",
    "RetryLoadRockets",
    "SearchQueryChanged",
    "FilterChipToggled",
    "RocketClicked",
    "RocketDetailsClosed",
    "ConsumeError",
    "RocketDetailViewModel",
    "RocketDetailIntent",
    "LoadRocketDetail",
    "ConsumeDetailError",
]
