"""
크루 정보 스키마
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class CrewListItem(BaseModel):
    """크루 목록 항목"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="이름", examples=["Robert Behnken"])
    agency: str = Field(description="소속 기관", examples=["NASA"])
    wikipedia: str = Field(description="위키백과 URL")
    status: str = Field(description="상태", examples=["active"])


class CrewDto(BaseModel):
    """SpaceX /v4/crew 응답 항목"""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    agency: Optional[str] = None
    image: Optional[str] = None
    wikipedia: Optional[str] = None
    launches: Optional[list[str]] = None
    status: Optional[str] = None

    def to_list_item(self) -> CrewListItem:
        return CrewListItem(
            name=self.name or "",
            agency=self.agency or "",
            wikipedia=self.wikipedia or "",
            status=self.status or "",
        )
