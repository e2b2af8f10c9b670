"""
RocketLens 테스트 - UI 문자열 변환
"""

import pytest
import sys
sys.path.insert(0, ".")

from rocketlens.schemas.text import TextHandle
from ui.strings import resolve


class TestResolve:

    def test_dynamic_text(self):
        assert resolve(TextHandle.dynamic("Falcon 9")) == "Falcon 9"

    def test_resource_with_args(self):
        assert resolve(TextHandle.from_resource("filter_range", "16.7", "23.3")) == "16.7 ~ 23.3"
        assert resolve(TextHandle.from_resource("filter_before", "2006")) == "2006년까지"
        assert resolve(TextHandle.from_resource("filter_after", "2014")) == "2014년부터"

    def test_year_labels_include_boundary_year(self):
        """연도 구간은 경계 연도를 포함하므로 라벨도 포함 표현 사용"""
        for resource in ("filter_before", "filter_after"):
            label = resolve(TextHandle.from_resource(resource, "2006"))
            assert "이전" not in label
            assert "이후" not in label

    def test_rocket_not_found(self):
        assert resolve(TextHandle.from_resource("rocket_not_found")) != "rocket_not_found"

    def test_unknown_resource(self):
        assert resolve(TextHandle.from_resource("no_such_key")) == "no_such_key"

    def test_none(self):
        assert resolve(None) == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
