"""
RocketLens
SpaceX 로켓 목록 조회, 검색, 필터링 애플리케이션
"""

__version__ = "0.1.0"
