"""
로켓 상세 화면 모델
"""

from typing import Optional, Union
from loguru import logger

from rocketlens.data_sources.rockets_repository import RocketNotFoundError, RocketsFetchError
from rocketlens.schemas.state import RocketDetailState
from rocketlens.schemas.text import TextHandle
from rocketlens.usecases.get_rocket_detail import GetRocketDetailUseCase
from .rockets_list import Intent


class LoadRocketDetail(Intent):
    """상세 정보 로드 (재시도 포함)"""


class ConsumeDetailError(Intent):
    """에러 표시 완료"""


RocketDetailIntent = Union[LoadRocketDetail, ConsumeDetailError]


class RocketDetailViewModel:
    """로켓 하나의 상세 정보를 API에서 불러옵니다 (캐시 없음)."""

    def __init__(
        self,
        rocket_id: str,
        get_rocket_detail: Optional[GetRocketDetailUseCase] = None,
        load_on_init: bool = True,
    ):
        self.get_rocket_detail = get_rocket_detail or GetRocketDetailUseCase()
        self.state = RocketDetailState(rocket_id=rocket_id)
        self.logger = logger.bind(component="RocketDetail")

        if load_on_init:
            self.process_intent(LoadRocketDetail())

    def process_intent(self, intent: RocketDetailIntent) -> RocketDetailState:
        if isinstance(intent, LoadRocketDetail):
            self._load()
        elif isinstance(intent, ConsumeDetailError):
            self._update(error=None)
        else:
            raise ValueError(f"알 수 없는 Intent: {intent!r}")

        return self.state

    def _update(self, **changes) -> None:
        self.state = self.state.model_copy(update=changes)

    def _load(self) -> None:
        self._update(is_loading=True, error=None)

        try:
            detail = self.get_rocket_detail.run(self.state.rocket_id)
        except RocketNotFoundError:
            self._update(is_loading=False, error=TextHandle.from_resource("rocket_not_found"))
            return
        except RocketsFetchError as e:
            message = str(e)
            self._update(
                is_loading=False,
                error=TextHandle.dynamic(message) if message else TextHandle.from_resource("data_error"),
            )
            return

        self.logger.info(f"Loaded rocket detail: {detail.name}")
        self._update(is_loading=False, detail=detail)
