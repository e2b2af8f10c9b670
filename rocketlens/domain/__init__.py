"""
RocketLens 도메인 로직 패키지
검색, 필터 판정, 필터 구간 계산을 담당합니다.
I/O가 없는 순수 로직만 둡니다.
"""

from .bucketing import FilterUtils
from .filters import FilterEngine, RangeFilter, YearFilter
from .search import SearchEngine
from .filter_options import FilterOptionsBuilder

__all__ = [
    "FilterUtils",
    "FilterEngine",
    "RangeFilter",
    "YearFilter",
    "SearchEngine",
    "FilterOptionsBuilder",
]
