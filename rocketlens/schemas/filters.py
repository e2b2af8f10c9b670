"""
필터 스키마
필터 값(조건), 필터 카테고리, 선택 상태를 정의합니다.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from .text import TextHandle


class FilterKey(str, Enum):
    """필터 카테고리 키"""
    NAME = "name"
    FIRST_FLIGHT = "first_flight"
    HEIGHT = "height"
    DIAMETER = "diameter"
    MASS = "mass"


# FilterItem.extra_params 키
PARAM_UNIT = "unit"


def filter_key_value(key: Union[FilterKey, str]) -> str:
    """FilterKey 또는 문자열 키를 문자열 키로 통일"""
    if isinstance(key, FilterKey):
        return key.value
    return str(key)


class ExactMatch(BaseModel):
    """정확히 일치하는 값 (예: 로켓 이름, 대소문자 무시)"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["exact"] = "exact"
    display_name: TextHandle
    value: str


class Range(BaseModel):
    """
    숫자 범위 (높이/지름/질량)

    start, end 모두 포함(inclusive). 한쪽이 None이면 그쪽은 제한 없음.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    display_name: TextHandle
    start: Optional[float] = None
    end: Optional[float] = None


class YearRange(BaseModel):
    """연도 범위 (첫 비행일), 양 끝 포함"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["year_range"] = "year_range"
    display_name: TextHandle
    start_year: Optional[int] = None
    end_year: Optional[int] = None


FilterValue = Annotated[
    Union[ExactMatch, Range, YearRange],
    Field(discriminator="kind"),
]


class FilterItem(BaseModel):
    """
    필터 카테고리 (예: "높이", "첫 비행")

    데이터가 새로 로드될 때마다 다시 만들어집니다.
    """
    model_config = ConfigDict(frozen=True)

    key: str = Field(description="카테고리 키 (FilterKey 값)", examples=["height"])
    display_name: TextHandle
    values: list[FilterValue] = Field(
        default_factory=list,
        description="현재 데이터 기준 선택 가능한 값 (순서 유지)"
    )
    extra_params: dict[str, TextHandle] = Field(
        default_factory=dict,
        description="부가 표시 정보 (예: 단위)"
    )


class FilterState(BaseModel):
    """
    현재 선택된 필터 상태

    카테고리 키 -> 선택된 값 집합.
    빈 집합은 "해당 카테고리 제한 없음"을 뜻합니다.
    """
    model_config = ConfigDict(frozen=True)

    selected_filters: dict[str, frozenset[FilterValue]] = Field(default_factory=dict)

    def get(self, key: Union[FilterKey, str]) -> frozenset:
        """키의 선택 집합 (건드리지 않은 키는 빈 집합)"""
        return self.selected_filters.get(filter_key_value(key), frozenset())

    def toggle(
        self,
        key: Union[FilterKey, str],
        value: Union[ExactMatch, Range, YearRange],
        selected: bool,
    ) -> "FilterState":
        """
        값을 선택/해제한 새 상태를 반환합니다.
        마지막 값을 해제해도 키는 빈 집합으로 남습니다.
        """
        key = filter_key_value(key)
        values = set(self.selected_filters.get(key, frozenset()))

        if selected:
            values.add(value)
        else:
            values.discard(value)

        updated = dict(self.selected_filters)
        updated[key] = frozenset(values)
        return FilterState(selected_filters=updated)

    @property
    def is_empty(self) -> bool:
        return all(len(values) == 0 for values in self.selected_filters.values())


class RangeInfo(BaseModel):
    """숫자 데이터의 구간 정보 (min, max, step=(max-min)/3)"""
    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    step: float


class YearRangeInfo(BaseModel):
    """연도 데이터의 구간 정보 (step은 정수)"""
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    step: int
