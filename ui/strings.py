"""
UI 문자열 리소스
코어가 만든 TextHandle을 실제 표시 문자열로 변환합니다.
"""

from rocketlens.schemas.text import TextHandle

STRINGS = {
    "filter_name": "이름",
    "filter_first_flight": "첫 비행",
    "filter_height": "높이",
    "filter_diameter": "지름",
    "filter_mass": "질량",
    "filter_under": "{0} 이하",
    "filter_over": "{0} 이상",
    "filter_before": "{0}년까지",
    "filter_after": "{0}년부터",
    "filter_range": "{0} ~ {1}",
    "unit_year": "년",
    "unit_meters": "m",
    "unit_kilograms": "kg",
    "data_error": "데이터를 불러오지 못했습니다.",
    "rocket_not_found": "로켓 정보를 찾을 수 없습니다.",
}


def resolve(handle: TextHandle | None) -> str:
    """TextHandle -> 표시 문자열 (없는 키는 키 이름 그대로)"""
    if handle is None:
        return ""
    if handle.is_dynamic:
        return handle.text or ""

    template = STRINGS.get(handle.resource)
    if template is None:
        return handle.resource
    return template.format(*handle.args)
