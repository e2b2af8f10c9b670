"""
표시 문자열 핸들
코어는 문자열 리소스 키와 인자만 만들고, 실제 문자열 변환은 UI가 담당합니다.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TextHandle(BaseModel):
    """
    불투명한 표시 문자열 핸들

    - resource: 리소스 키 + 인자 (예: "filter_under", ("16.7",))
    - dynamic: 그대로 표시할 원문 (예: 로켓 이름, 서버 에러 메시지)
    """
    model_config = ConfigDict(frozen=True)

    resource: Optional[str] = Field(
        default=None,
        description="문자열 리소스 키",
        examples=["filter_under"]
    )
    args: tuple[str, ...] = Field(
        default=(),
        description="리소스 포맷 인자 (이미 포맷된 문자열)",
        examples=[("16.7",)]
    )
    text: Optional[str] = Field(
        default=None,
        description="리소스 없이 그대로 표시할 문자열",
        examples=["Falcon 9"]
    )

    @classmethod
    def from_resource(cls, resource: str, *args: str) -> "TextHandle":
        return cls(resource=resource, args=tuple(args))

    @classmethod
    def dynamic(cls, text: str) -> "TextHandle":
        return cls(text=text)

    @property
    def is_dynamic(self) -> bool:
        return self.resource is None
