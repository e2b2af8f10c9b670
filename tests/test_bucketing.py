"""
RocketLens 테스트 - 필터 구간 계산 / 필터 옵션
"""

import pytest
import sys
sys.path.insert(0, ".")

from rocketlens.domain.bucketing import FilterUtils
from rocketlens.domain.filter_options import FilterOptionsBuilder
from rocketlens.domain.filters import FilterEngine, RangeFilter
from rocketlens.schemas.filters import PARAM_UNIT, ExactMatch, FilterKey, Range, YearRange
from rocketlens.schemas.rocket import RocketListItem
from rocketlens.schemas.text import TextHandle


def make_rocket(id: str, name: str = "Rocket", first_flight: str = "24.03.2006",
                height: float = 10.0, diameter: float = 1.0, mass: int = 1000) -> RocketListItem:
    return RocketListItem(
        id=id, name=name, first_flight=first_flight,
        height=height, diameter=diameter, mass=mass,
    )


class TestExtractYear:
    """연도 추출 테스트"""

    def test_valid_date(self):
        assert FilterUtils.extract_year("24.03.2006") == 2006

    @pytest.mark.parametrize("date", ["", "2006", "2006-03-24", "24/03/2006", "24.03.06", "abc"])
    def test_invalid_date(self, date):
        assert FilterUtils.extract_year(date) is None


class TestRangeInfo:
    """구간 정보 계산 테스트"""

    def test_empty_values(self):
        assert FilterUtils.generate_double_range_info([]) is None

    def test_three_heights(self):
        info = FilterUtils.generate_double_range_info([10.0, 20.0, 30.0])
        assert info.min == 10.0
        assert info.max == 30.0
        assert info.step == pytest.approx(6.667, abs=1e-3)

    def test_unordered_values(self):
        info = FilterUtils.generate_double_range_info([30.0, 10.0, 25.0])
        assert (info.min, info.max) == (10.0, 30.0)

    def test_degenerate_values(self):
        """min == max 이면 step 0 (에러 없음)"""
        info = FilterUtils.generate_double_range_info([5.0, 5.0])
        assert info.step == 0

        buckets = FilterOptionsBuilder.range_buckets(info)
        assert len(buckets) == 3
        assert buckets[0].end == buckets[1].start == buckets[1].end == buckets[2].start == 5.0

    def test_year_info_skips_invalid_dates(self):
        info = FilterUtils.generate_year_range_info(["01.01.2000", "bad", "", "01.01.2020"])
        assert (info.min, info.max) == (2000, 2020)
        assert info.step == 6

    def test_year_step_is_integer(self):
        info = FilterUtils.generate_year_range_info(["01.01.2006", "01.01.2008"])
        assert info.step == 0
        assert isinstance(info.step, int)

    def test_year_info_without_valid_dates(self):
        assert FilterUtils.generate_year_range_info(["bad", ""]) is None
        assert FilterUtils.generate_year_range_info([]) is None


class TestBuckets:
    """under / between / over 구간 테스트"""

    def setup_method(self):
        self.info = FilterUtils.generate_double_range_info([10.0, 20.0, 30.0])
        self.under, self.between, self.over = FilterOptionsBuilder.range_buckets(self.info)

    def test_bucket_bounds(self):
        lower = 10.0 + 20.0 / 3
        upper = 30.0 - 20.0 / 3
        assert self.under.start is None and self.under.end == pytest.approx(lower)
        assert self.between.start == pytest.approx(lower) and self.between.end == pytest.approx(upper)
        assert self.over.start == pytest.approx(upper) and self.over.end is None

    def test_display_handles(self):
        assert self.under.display_name == TextHandle.from_resource("filter_under", "16.7")
        assert self.between.display_name == TextHandle.from_resource("filter_range", "16.7", "23.3")
        assert self.over.display_name == TextHandle.from_resource("filter_over", "23.3")

    def test_buckets_cover_all_values(self):
        for value in [10.0, 20.0, 30.0]:
            assert any(RangeFilter.matches(value, b) for b in (self.under, self.between, self.over))

        assert RangeFilter.matches(10.0, self.under)
        assert RangeFilter.matches(20.0, self.between)
        assert RangeFilter.matches(30.0, self.over)

    def test_boundary_value_matches_two_buckets(self):
        """경계값은 인접한 두 구간에 모두 포함됨 (의도된 동작)"""
        lower = self.info.min + self.info.step
        upper = self.info.max - self.info.step

        assert RangeFilter.matches(lower, self.under)
        assert RangeFilter.matches(lower, self.between)
        assert not RangeFilter.matches(lower, self.over)

        assert RangeFilter.matches(upper, self.between)
        assert RangeFilter.matches(upper, self.over)

    def test_boundary_rocket_selected_by_either_bucket(self):
        lower = self.info.min + self.info.step
        rockets = [make_rocket("a", height=10.0), make_rocket("b", height=lower), make_rocket("c", height=30.0)]
        engine = FilterEngine()

        under_only = engine.apply(rockets, {"height": {self.under}})
        between_only = engine.apply(rockets, {"height": {self.between}})

        assert [r.id for r in under_only] == ["a", "b"]
        assert [r.id for r in between_only] == ["b"]

    def test_year_buckets(self):
        info = FilterUtils.generate_year_range_info(["01.01.2000", "01.01.2020"])
        before, middle, after = FilterOptionsBuilder.year_buckets(info)

        assert (before.start_year, before.end_year) == (None, 2006)
        assert (middle.start_year, middle.end_year) == (2006, 2014)
        assert (after.start_year, after.end_year) == (2014, None)
        assert before.display_name == TextHandle.from_resource("filter_before", "2006")
        assert after.display_name == TextHandle.from_resource("filter_after", "2014")

    def test_absent_info_gives_no_buckets(self):
        assert FilterOptionsBuilder.range_buckets(None) == []
        assert FilterOptionsBuilder.year_buckets(None) == []


class TestFilterOptionsBuilder:
    """FilterOptionsBuilder 테스트"""

    def setup_method(self):
        self.builder = FilterOptionsBuilder()
        self.rockets = [
            make_rocket("1", name="Starship", first_flight="20.04.2023", height=118.0, mass=1335000),
            make_rocket("2", name="Falcon 1", first_flight="24.03.2006", height=22.25, mass=30146),
            make_rocket("3", name="Falcon 1", first_flight="24.03.2006", height=22.25, mass=30146),
        ]

    def test_empty_rockets(self):
        assert self.builder.build([]) == []

    def test_category_order(self):
        items = self.builder.build(self.rockets)
        assert [item.key for item in items] == [
            FilterKey.NAME.value,
            FilterKey.FIRST_FLIGHT.value,
            FilterKey.HEIGHT.value,
            FilterKey.DIAMETER.value,
            FilterKey.MASS.value,
        ]

    def test_name_values_distinct_and_sorted(self):
        name_item = self.builder.build(self.rockets)[0]
        assert [v.value for v in name_item.values] == ["Falcon 1", "Starship"]
        assert all(isinstance(v, ExactMatch) for v in name_item.values)
        assert name_item.values[0].display_name == TextHandle.dynamic("Falcon 1")

    def test_value_kinds_and_units(self):
        items = {item.key: item for item in self.builder.build(self.rockets)}

        assert all(isinstance(v, YearRange) for v in items["first_flight"].values)
        assert all(isinstance(v, Range) for v in items["height"].values)
        assert items["first_flight"].extra_params[PARAM_UNIT] == TextHandle.from_resource("unit_year")
        assert items["height"].extra_params[PARAM_UNIT] == TextHandle.from_resource("unit_meters")
        assert items["mass"].extra_params[PARAM_UNIT] == TextHandle.from_resource("unit_kilograms")
        assert PARAM_UNIT not in items["name"].extra_params

    def test_single_rocket_still_has_filters(self):
        items = self.builder.build(self.rockets[:1])
        assert len(items) == 5
        assert all(len(item.values) in (1, 3) for item in items)

    def test_unparsable_dates_give_empty_year_values(self):
        rockets = [make_rocket("x", first_flight="unknown")]
        items = {item.key: item for item in self.builder.build(rockets)}
        assert items["first_flight"].values == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
