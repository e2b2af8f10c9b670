"""
RocketLens API 라우터
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from rocketlens.data_sources.crew_repository import CrewRepository, CrewFetchError
from rocketlens.data_sources.rockets_repository import (
    RocketNotFoundError,
    RocketsFetchError,
    RocketsRepository,
)
from rocketlens.domain.filter_options import FilterOptionsBuilder
from rocketlens.schemas.filters import FilterItem, FilterState
from rocketlens.schemas.crew import CrewListItem
from rocketlens.schemas.rocket import RocketDetail, RocketListItem
from rocketlens.usecases.apply_search import ApplyRocketsSearchUseCase, SearchInput
from rocketlens.usecases.apply_filters import ApplyRocketsFiltersUseCase, FilterInput

router = APIRouter()


def get_repository() -> RocketsRepository:
    return RocketsRepository()


RepositoryDep = Annotated[RocketsRepository, Depends(get_repository)]


def get_crew_repository() -> CrewRepository:
    return CrewRepository()


CrewRepositoryDep = Annotated[CrewRepository, Depends(get_crew_repository)]


class SearchRequest(BaseModel):
    """검색/필터 요청"""
    query: str = ""
    filters: FilterState = Field(default_factory=FilterState)
    refresh: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "query": "falcon",
                "filters": {
                    "selected_filters": {
                        "first_flight": [
                            {
                                "kind": "year_range",
                                "display_name": {"resource": "filter_before", "args": ["2010"]},
                                "end_year": 2010,
                            }
                        ]
                    }
                },
                "refresh": False,
            }
        }
    )


class SearchResponse(BaseModel):
    """검색/필터 결과"""
    total_count: int = Field(description="전체 로켓 수")
    rockets: list[RocketListItem] = Field(default_factory=list)


def _load_rockets(repository: RocketsRepository, refresh: bool) -> list[RocketListItem]:
    try:
        return repository.get_rockets_list(refresh=refresh)
    except RocketsFetchError as e:
        raise HTTPException(status_code=502, detail=f"로켓 데이터 조회 실패: {e}")


@router.get("/rockets", response_model=list[RocketListItem])
def list_rockets(repository: RepositoryDep, refresh: bool = False) -> list[RocketListItem]:
    """전체 로켓 목록"""
    return _load_rockets(repository, refresh)


@router.get("/filters", response_model=list[FilterItem])
def list_filters(repository: RepositoryDep, refresh: bool = False) -> list[FilterItem]:
    """현재 데이터 기준 사용 가능한 필터 목록"""
    rockets = _load_rockets(repository, refresh)
    return FilterOptionsBuilder().build(rockets)


@router.post("/rockets/search", response_model=SearchResponse)
def search_rockets(request: SearchRequest, repository: RepositoryDep) -> SearchResponse:
    """
    로켓 검색 및 필터링

    - 이름 검색 (대소문자 무시)
    - 카테고리 사이 AND, 카테고리 내부 OR
    """
    rockets = _load_rockets(repository, request.refresh)

    searched = ApplyRocketsSearchUseCase().run(SearchInput(rockets=rockets, query=request.query))
    filtered = ApplyRocketsFiltersUseCase().run(
        FilterInput(rockets=searched, selected_filters=request.filters.selected_filters)
    )

    return SearchResponse(total_count=len(rockets), rockets=list(filtered))


@router.get("/rockets/{rocket_id}", response_model=RocketDetail)
def get_rocket_detail(rocket_id: str, repository: RepositoryDep) -> RocketDetail:
    """로켓 상세 (캐시 없이 API 조회)"""
    try:
        return repository.get_rocket_detail(rocket_id)
    except RocketNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RocketsFetchError as e:
        raise HTTPException(status_code=502, detail=f"로켓 상세 조회 실패: {e}")


@router.get("/crew", response_model=list[CrewListItem])
def list_crew(repository: CrewRepositoryDep, refresh: bool = False) -> list[CrewListItem]:
    """크루 목록"""
    try:
        return repository.get_crew(refresh=refresh)
    except CrewFetchError as e:
        raise HTTPException(status_code=502, detail=f"크루 데이터 조회 실패: {e}")


@router.get("/schema/filter-state")
def get_filter_state_schema():
    """필터 상태 스키마 조회"""
    return FilterState.model_json_schema()
