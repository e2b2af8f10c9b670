"""
크루 목록 조회 UseCase
"""

from typing import Optional

from .base import BaseUseCase
from rocketlens.schemas.crew import CrewListItem
from rocketlens.data_sources.crew_repository import CrewRepository


class GetCrewListUseCase(BaseUseCase[bool, list[CrewListItem]]):
    """크루 목록 조회 (입력: refresh 여부)"""

    name = "GetCrewListUseCase"

    def __init__(self, repository: Optional[CrewRepository] = None):
        super().__init__()
        self.repository = repository or CrewRepository()

    def _process(self, refresh: bool) -> list[CrewListItem]:
        return self.repository.get_crew(refresh=refresh)
