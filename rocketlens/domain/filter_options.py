"""
필터 옵션 생성
현재 로켓 목록에서 카테고리별 선택 가능한 필터 값을 만듭니다.
"""

from typing import Optional, Sequence

from rocketlens.schemas.filters import (
    PARAM_UNIT,
    ExactMatch,
    FilterItem,
    FilterKey,
    Range,
    RangeInfo,
    YearRange,
    YearRangeInfo,
)
from rocketlens.schemas.rocket import RocketListItem
from rocketlens.schemas.text import TextHandle
from .bucketing import FilterUtils


def _format_number(value: float) -> str:
    return f"{value:.1f}"


class FilterOptionsBuilder:
    """
    필터 옵션 빌더

    데이터가 로드될 때마다 카테고리 목록을 새로 만듭니다.
    순서: 이름, 첫 비행, 높이, 지름, 질량
    """

    def build(self, rockets: Sequence[RocketListItem]) -> list[FilterItem]:
        """로켓 목록으로 사용 가능한 필터 목록 생성 (빈 목록이면 빈 리스트)"""
        if not rockets:
            return []

        return [
            self.build_name_filter(rockets),
            self.build_first_flight_filter(rockets),
            self._build_range_filter(
                FilterKey.HEIGHT, "filter_height", "unit_meters",
                [r.height for r in rockets],
            ),
            self._build_range_filter(
                FilterKey.DIAMETER, "filter_diameter", "unit_meters",
                [r.diameter for r in rockets],
            ),
            self._build_range_filter(
                FilterKey.MASS, "filter_mass", "unit_kilograms",
                [float(r.mass) for r in rockets],
            ),
        ]

    def build_name_filter(self, rockets: Sequence[RocketListItem]) -> FilterItem:
        """이름 필터 (중복 제거 후 정렬)"""
        names = sorted({rocket.name for rocket in rockets})
        values = [
            ExactMatch(display_name=TextHandle.dynamic(name), value=name)
            for name in names
        ]
        return FilterItem(
            key=FilterKey.NAME.value,
            display_name=TextHandle.from_resource("filter_name"),
            values=values,
        )

    def build_first_flight_filter(self, rockets: Sequence[RocketListItem]) -> FilterItem:
        """첫 비행 연도 필터 (before / range / after)"""
        info = FilterUtils.generate_year_range_info(r.first_flight for r in rockets)
        return FilterItem(
            key=FilterKey.FIRST_FLIGHT.value,
            display_name=TextHandle.from_resource("filter_first_flight"),
            values=self.year_buckets(info),
            extra_params={PARAM_UNIT: TextHandle.from_resource("unit_year")},
        )

    def _build_range_filter(
        self,
        key: FilterKey,
        display_resource: str,
        unit_resource: str,
        values: list[float],
    ) -> FilterItem:
        info = FilterUtils.generate_double_range_info(values)
        return FilterItem(
            key=key.value,
            display_name=TextHandle.from_resource(display_resource),
            values=self.range_buckets(info),
            extra_params={PARAM_UNIT: TextHandle.from_resource(unit_resource)},
        )

    @staticmethod
    def range_buckets(info: Optional[RangeInfo]) -> list[Range]:
        """under / between / over 세 구간 (경계값은 두 구간에 모두 포함)"""
        if info is None:
            return []

        lower = info.min + info.step
        upper = info.max - info.step
        return [
            Range(
                display_name=TextHandle.from_resource("filter_under", _format_number(lower)),
                end=lower,
            ),
            Range(
                display_name=TextHandle.from_resource(
                    "filter_range", _format_number(lower), _format_number(upper)
                ),
                start=lower,
                end=upper,
            ),
            Range(
                display_name=TextHandle.from_resource("filter_over", _format_number(upper)),
                start=upper,
            ),
        ]

    @staticmethod
    def year_buckets(info: Optional[YearRangeInfo]) -> list[YearRange]:
        """before / range / after 세 연도 구간"""
        if info is None:
            return []

        lower = info.min + info.step
        upper = info.max - info.step
        return [
            YearRange(
                display_name=TextHandle.from_resource("filter_before", str(lower)),
                end_year=lower,
            ),
            YearRange(
                display_name=TextHandle.from_resource("filter_range", str(lower), str(upper)),
                start_year=lower,
                end_year=upper,
            ),
            YearRange(
                display_name=TextHandle.from_resource("filter_after", str(upper)),
                start_year=upper,
            ),
        ]
