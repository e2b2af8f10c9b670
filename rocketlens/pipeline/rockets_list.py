"""
로켓 목록 화면 모델
UI 이벤트(Intent)를 받아 화면 상태를 갱신합니다.
"""

from typing import Optional, Sequence, Union
from loguru import logger
from pydantic import BaseModel, ConfigDict

from rocketlens.data_sources.rockets_repository import RocketsFetchError
from rocketlens.domain.filter_options import FilterOptionsBuilder
from rocketlens.schemas.filters import FilterState, FilterValue
from rocketlens.schemas.rocket import RocketListItem
from rocketlens.schemas.state import RocketsListState
from rocketlens.schemas.text import TextHandle
from rocketlens.usecases.get_rockets_list import GetRocketsListUseCase
from rocketlens.usecases.apply_search import ApplyRocketsSearchUseCase, SearchInput
from rocketlens.usecases.apply_filters import ApplyRocketsFiltersUseCase, FilterInput


# === Intent ===

class Intent(BaseModel):
    model_config = ConfigDict(frozen=True)


class LoadRockets(Intent):
    """최초 로드 (캐시 우선)"""


class RefreshRockets(Intent):
    """새로고침: 검색어/필터 초기화 후 API에서 다시 로드"""


class RetryLoadRockets(Intent):
    """로드 실패 후 재시도"""


class SearchQueryChanged(Intent):
    query: str


class FilterChipToggled(Intent):
    filter_key: str
    filter_value: FilterValue
    is_selected: bool


class RocketClicked(Intent):
    """목록에서 로켓 선택 (상세 화면 열기)"""
    rocket_id: str


class RocketDetailsClosed(Intent):
    """상세 화면 닫기"""


class ConsumeError(Intent):
    """에러 표시 완료"""


RocketsListIntent = Union[
    LoadRockets,
    RefreshRockets,
    RetryLoadRockets,
    SearchQueryChanged,
    FilterChipToggled,
    RocketClicked,
    RocketDetailsClosed,
    ConsumeError,
]


class RocketsListViewModel:
    """
    로켓 목록 화면 모델

    [로드]     GetRockets → 필터 옵션 생성 → 현재 검색어/필터 재적용
    [검색/필터] Search → Filter (항상 최신 rockets와 최신 필터 상태로 계산)
    """

    def __init__(
        self,
        get_rockets_list: Optional[GetRocketsListUseCase] = None,
        apply_search: Optional[ApplyRocketsSearchUseCase] = None,
        apply_filters: Optional[ApplyRocketsFiltersUseCase] = None,
        load_on_init: bool = True,
    ):
        self.get_rockets_list = get_rockets_list or GetRocketsListUseCase()
        self.apply_search = apply_search or ApplyRocketsSearchUseCase()
        self.apply_filters = apply_filters or ApplyRocketsFiltersUseCase()
        self.options_builder = FilterOptionsBuilder()

        self.state = RocketsListState()
        self.logger = logger.bind(component="RocketsList")

        if load_on_init:
            self.process_intent(LoadRockets())

    def process_intent(self, intent: RocketsListIntent) -> RocketsListState:
        """UI 이벤트 처리 (유일한 진입점)"""
        self.logger.debug(f"Intent: {type(intent).__name__}")

        if isinstance(intent, (LoadRockets, RetryLoadRockets)):
            self._load_rockets(refresh=False)
        elif isinstance(intent, RefreshRockets):
            self._refresh_rockets()
        elif isinstance(intent, SearchQueryChanged):
            self._update_search_query(intent.query)
        elif isinstance(intent, FilterChipToggled):
            self._toggle_filter(intent.filter_key, intent.filter_value, intent.is_selected)
        elif isinstance(intent, RocketClicked):
            self._update(selected_rocket_id=intent.rocket_id)
        elif isinstance(intent, RocketDetailsClosed):
            self._update(selected_rocket_id=None)
        elif isinstance(intent, ConsumeError):
            self._update(error=None)
        else:
            raise ValueError(f"알 수 없는 Intent: {intent!r}")

        return self.state

    def _update(self, **changes) -> None:
        self.state = self.state.model_copy(update=changes)

    def _load_rockets(self, refresh: bool) -> None:
        # 새로고침은 전체 로딩 대신 새로고침 표시만
        self._update(is_loading=not refresh, is_refreshing=refresh, error=None)

        try:
            rockets = self.get_rockets_list.run(refresh)
        except RocketsFetchError as e:
            message = str(e)
            self._update(
                is_loading=False,
                is_refreshing=False,
                error=TextHandle.dynamic(message) if message else TextHandle.from_resource("data_error"),
            )
            return

        self.logger.info(f"Loaded {len(rockets)} rockets (refresh={refresh})")
        self._update(
            is_loading=False,
            is_refreshing=False,
            rockets=rockets,
            filtered_rockets=self._apply_search_and_filters(
                rockets, self.state.search_query, self.state.active_filters
            ),
            available_filters=self.options_builder.build(rockets),
            error=None,
        )

    def _refresh_rockets(self) -> None:
        self._update(search_query="", active_filters=FilterState())
        self._load_rockets(refresh=True)

    def _update_search_query(self, query: str) -> None:
        self._update(
            search_query=query,
            filtered_rockets=self._apply_search_and_filters(
                self.state.rockets, query, self.state.active_filters
            ),
        )

    def _toggle_filter(self, filter_key: str, filter_value, is_selected: bool) -> None:
        active_filters = self.state.active_filters.toggle(filter_key, filter_value, is_selected)
        self._update(
            active_filters=active_filters,
            filtered_rockets=self._apply_search_and_filters(
                self.state.rockets, self.state.search_query, active_filters
            ),
        )

    def _apply_search_and_filters(
        self,
        rockets: Sequence[RocketListItem],
        query: str,
        filters: FilterState,
    ) -> list[RocketListItem]:
        searched = self.apply_search.run(SearchInput(rockets=rockets, query=query))
        filtered = self.apply_filters.run(
            FilterInput(rockets=searched, selected_filters=filters.selected_filters)
        )
        return list(filtered)
