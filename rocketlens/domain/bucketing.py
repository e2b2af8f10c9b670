"""
구간 계산 유틸
현재 데이터의 최소/최대값으로 필터 구간(under/between/over)의 경계를 계산합니다.
"""

from datetime import datetime
from typing import Iterable, Optional

from rocketlens.schemas.filters import RangeInfo, YearRangeInfo
from rocketlens.schemas.rocket import DATE_PATTERN

BUCKET_COUNT = 3


class FilterUtils:
    """
    필터 구간 계산

    step = (max - min) / 3 이며, 세 구간은 다음과 같이 만들어집니다:
    - under:   end = min + step
    - between: start = min + step, end = max - step
    - over:    start = max - step

    경계값(min + step, max - step)은 인접한 두 구간에 모두 포함됩니다.
    """

    @staticmethod
    def extract_year(date: str) -> Optional[int]:
        """dd.mm.yyyy 문자열에서 연도 추출 (실패 시 None)"""
        if not date:
            return None
        try:
            return datetime.strptime(date, DATE_PATTERN).year
        except (TypeError, ValueError):
            return None

    @staticmethod
    def generate_double_range_info(values: Iterable[float]) -> Optional[RangeInfo]:
        """숫자 목록의 구간 정보 (빈 목록이면 None)"""
        values = list(values)
        if not values:
            return None

        min_value = min(values)
        max_value = max(values)
        return RangeInfo(
            min=min_value,
            max=max_value,
            step=(max_value - min_value) / BUCKET_COUNT,
        )

    @staticmethod
    def generate_year_range_info(dates: Iterable[str]) -> Optional[YearRangeInfo]:
        """날짜 목록의 연도 구간 정보 (파싱 실패한 날짜는 제외)"""
        years = [
            year for year in (FilterUtils.extract_year(d) for d in dates)
            if year is not None
        ]
        if not years:
            return None

        min_year = min(years)
        max_year = max(years)
        return YearRangeInfo(
            min=min_year,
            max=max_year,
            step=(max_year - min_year) // BUCKET_COUNT,
        )
