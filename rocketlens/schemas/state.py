"""
화면 상태 스키마
로켓 목록 화면이 렌더링에 사용하는 상태입니다.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .filters import FilterItem, FilterState
from .rocket import RocketDetail, RocketListItem
from .text import TextHandle


class RocketsListState(BaseModel):
    """
    로켓 목록 화면 상태

    불변 객체이며 model_copy(update=...)로만 갱신합니다.
    rockets는 원본 목록, filtered_rockets는 검색/필터 적용 결과입니다.
    """
    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    is_refreshing: bool = False
    rockets: list[RocketListItem] = Field(default_factory=list)
    filtered_rockets: list[RocketListItem] = Field(default_factory=list)
    search_query: str = ""
    active_filters: FilterState = Field(default_factory=FilterState)
    available_filters: list[FilterItem] = Field(default_factory=list)
    error: Optional[TextHandle] = None
    selected_rocket_id: Optional[str] = Field(
        default=None,
        description="상세 화면으로 열 로켓 ID (없으면 목록 화면)"
    )


class RocketDetailState(BaseModel):
    """로켓 상세 화면 상태"""
    model_config = ConfigDict(frozen=True)

    rocket_id: str
    is_loading: bool = False
    detail: Optional[RocketDetail] = None
    error: Optional[TextHandle] = None
