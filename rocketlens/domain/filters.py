"""
필터 엔진
규칙 기반으로 로켓 목록을 필터링합니다.
"""

from typing import Callable, Iterable, Mapping, Optional, Sequence, Union
from loguru import logger

from rocketlens.schemas.filters import ExactMatch, FilterKey, Range, YearRange
from rocketlens.schemas.rocket import RocketListItem
from .bucketing import FilterUtils

FilterValueT = Union[ExactMatch, Range, YearRange]


def _matches_bounds(value, start, end) -> bool:
    if start is not None and end is not None:
        return start <= value <= end
    if start is not None:
        return value >= start
    if end is not None:
        return value <= end
    # 양쪽 경계가 모두 없는 값은 잘못 만들어진 조건
    return False


class RangeFilter:
    """숫자 범위 조건 판정"""

    @staticmethod
    def matches(value: float, range_value: Range) -> bool:
        return _matches_bounds(value, range_value.start, range_value.end)


class YearFilter:
    """첫 비행 연도 조건 판정"""

    @staticmethod
    def matches(date: str, year_range: YearRange) -> bool:
        year: Optional[int] = FilterUtils.extract_year(date)
        if year is None:
            return False
        return _matches_bounds(year, year_range.start_year, year_range.end_year)


class FilterEngine:
    """
    규칙 기반 필터 엔진

    선택된 필터(카테고리 키 -> 값 집합)로 로켓 목록을 줄입니다.
    - 카테고리 사이: AND (선택값이 있는 모든 카테고리를 만족)
    - 카테고리 내부: OR (선택값 중 하나만 만족하면 통과)
    - 알 수 없는 키는 제한 없음, 카테고리와 종류가 다른 값은 무시
    """

    def __init__(self):
        # 카테고리 키 -> (값 타입, 체크 함수)
        self._filters: dict[FilterKey, tuple[type, Callable]] = {
            FilterKey.NAME: (ExactMatch, self._check_name),
            FilterKey.FIRST_FLIGHT: (YearRange, self._check_first_flight),
            FilterKey.HEIGHT: (Range, self._check_height),
            FilterKey.DIAMETER: (Range, self._check_diameter),
            FilterKey.MASS: (Range, self._check_mass),
        }

    def apply(
        self,
        rockets: Sequence[RocketListItem],
        selected_filters: Mapping[str, Iterable[FilterValueT]],
    ) -> Sequence[RocketListItem]:
        """
        선택된 필터로 로켓 목록을 필터링합니다.

        Args:
            rockets: 로켓 목록
            selected_filters: 카테고리 키 -> 선택된 값 집합

        Returns:
            조건을 만족하는 로켓 목록 (입력 순서 유지).
            선택된 값이 하나도 없으면 입력 목록 객체를 그대로 반환합니다.
        """
        active = {}
        for key, values in selected_filters.items():
            values = list(values)
            if values:
                active[key] = values

        if not active:
            return rockets

        result = [
            rocket for rocket in rockets
            if all(self._matches_category(rocket, key, values) for key, values in active.items())
        ]

        logger.debug(f"Filter result: {len(result)}/{len(rockets)} rockets ({list(active)})")
        return result

    def _matches_category(
        self,
        rocket: RocketListItem,
        key: Union[FilterKey, str],
        values: list[FilterValueT],
    ) -> bool:
        try:
            filter_key = FilterKey(key)
        except ValueError:
            # 알 수 없는 키는 통과
            return True

        value_type, check_func = self._filters[filter_key]
        return any(
            check_func(rocket, value)
            for value in values
            if isinstance(value, value_type)
        )

    # === 카테고리별 체크 함수 ===

    def _check_name(self, rocket: RocketListItem, value: ExactMatch) -> bool:
        return value.value.lower() == rocket.name.lower()

    def _check_first_flight(self, rocket: RocketListItem, value: YearRange) -> bool:
        return YearFilter.matches(rocket.first_flight, value)

    def _check_height(self, rocket: RocketListItem, value: Range) -> bool:
        return RangeFilter.matches(rocket.height, value)

    def _check_diameter(self, rocket: RocketListItem, value: Range) -> bool:
        return RangeFilter.matches(rocket.diameter, value)

    def _check_mass(self, rocket: RocketListItem, value: Range) -> bool:
        return RangeFilter.matches(float(rocket.mass), value)
