"""
로켓 정보 스키마
SpaceX API 응답(DTO)과 목록 화면용 도메인 모델을 정의합니다.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

# 목록 모델의 첫 비행일 포맷 (dd.mm.yyyy)
DATE_PATTERN = "%d.%m.%Y"
API_DATE_PATTERN = "%Y-%m-%d"


class RocketListItem(BaseModel):
    """
    로켓 목록 항목

    데이터 레이어에서 생성되며 이후 변경되지 않습니다.
    필터/검색 엔진의 기본 입력입니다.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(
        description="로켓 고유 ID",
        examples=["5e9d0d95eda69955f709d1eb"]
    )
    name: str = Field(
        description="로켓 이름",
        examples=["Falcon 1"]
    )
    first_flight: str = Field(
        description="첫 비행일 (dd.mm.yyyy)",
        examples=["24.03.2006"]
    )
    height: float = Field(
        description="높이 (m), 정보 없으면 -1",
        examples=[22.25]
    )
    diameter: float = Field(
        description="지름 (m), 정보 없으면 -1",
        examples=[1.68]
    )
    mass: int = Field(
        description="질량 (kg), 정보 없으면 -1",
        examples=[30146]
    )


class Dimensions(BaseModel):
    """길이 단위 값"""
    meters: Optional[float] = None
    feet: Optional[float] = None


class Mass(BaseModel):
    """질량 단위 값"""
    kg: Optional[float] = None
    lb: Optional[float] = None


class StageDetail(BaseModel):
    """단(stage) 상세, 정보 없으면 -1 / False"""
    model_config = ConfigDict(frozen=True)

    reusable: bool = False
    engines: int = -1
    fuel_amount_tons: float = -1.0
    burn_time_sec: int = -1


class RocketDetail(BaseModel):
    """로켓 상세 화면 모델"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = Field(default="", description="로켓 설명")
    height: float = -1.0
    diameter: float = -1.0
    mass: int = -1
    first_stage: StageDetail = Field(default_factory=StageDetail)
    second_stage: StageDetail = Field(default_factory=StageDetail)
    images: list[str] = Field(
        default_factory=list,
        description="flickr 이미지 URL",
        examples=[["https://imgur.com/DaCfMsj.jpg"]]
    )


class StageDto(BaseModel):
    """first_stage / second_stage 응답 (필요한 필드만)"""
    model_config = ConfigDict(extra="ignore")

    reusable: Optional[bool] = None
    engines: Optional[int] = None
    fuel_amount_tons: Optional[float] = None
    burn_time_sec: Optional[int] = None

    def to_detail(self) -> StageDetail:
        return StageDetail(
            reusable=self.reusable or False,
            engines=self.engines if self.engines is not None else -1,
            fuel_amount_tons=self.fuel_amount_tons if self.fuel_amount_tons is not None else -1.0,
            burn_time_sec=self.burn_time_sec if self.burn_time_sec is not None else -1,
        )


class RocketDto(BaseModel):
    """
    SpaceX /v4/rockets 응답 항목

    목록/상세 화면에 필요한 필드만 정의하고 나머지는 무시합니다.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    first_flight: Optional[str] = Field(
        default=None,
        description="첫 비행일 (yyyy-mm-dd)",
        examples=["2006-03-24"]
    )
    height: Optional[Dimensions] = None
    diameter: Optional[Dimensions] = None
    mass: Optional[Mass] = None
    first_stage: Optional[StageDto] = None
    second_stage: Optional[StageDto] = None
    flickr_images: Optional[list[str]] = None
    description: Optional[str] = None

    def to_detail(self) -> RocketDetail:
        """상세 모델로 변환"""
        return RocketDetail(
            id=self.id or "",
            name=self.name or "",
            description=self.description or "",
            height=self._meters(self.height),
            diameter=self._meters(self.diameter),
            mass=self._kilograms(),
            first_stage=(self.first_stage or StageDto()).to_detail(),
            second_stage=(self.second_stage or StageDto()).to_detail(),
            images=list(self.flickr_images or []),
        )

    def to_list_item(self) -> RocketListItem:
        """목록 모델로 변환"""
        return RocketListItem(
            id=self.id or "",
            name=self.name or "",
            first_flight=format_first_flight(self.first_flight or ""),
            height=self._meters(self.height),
            diameter=self._meters(self.diameter),
            mass=self._kilograms(),
        )

    def _kilograms(self) -> int:
        if self.mass is None or self.mass.kg is None:
            return -1
        return int(self.mass.kg)

    @staticmethod
    def _meters(dimensions: Optional[Dimensions]) -> float:
        if dimensions is None or dimensions.meters is None:
            return -1.0
        return dimensions.meters


def format_first_flight(date_str: str) -> str:
    """
    API 날짜(yyyy-mm-dd)를 목록 포맷(dd.mm.yyyy)으로 변환합니다.
    파싱에 실패하면 원문을 그대로 반환합니다 (연도 필터에서 불일치 처리).
    """
    try:
        return datetime.strptime(date_str, API_DATE_PATTERN).strftime(DATE_PATTERN)
    except ValueError:
        return date_str
