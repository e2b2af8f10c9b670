"""
검색 엔진
로켓 이름에 대한 자유 텍스트 검색입니다.
"""

from typing import Sequence

from rocketlens.schemas.rocket import RocketListItem


class SearchEngine:
    """이름 부분 문자열 검색 (대소문자 무시, 순서 유지)"""

    def search(
        self,
        rockets: Sequence[RocketListItem],
        query: str,
    ) -> Sequence[RocketListItem]:
        """
        검색어가 비어 있으면(공백만 있는 경우 포함) 입력 목록을 그대로 반환합니다.
        """
        if not query or not query.strip():
            return rockets

        needle = query.lower()
        return [rocket for rocket in rockets if needle in rocket.name.lower()]
