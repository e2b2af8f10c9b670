"""
SpaceX API 클라이언트
- GET /v4/rockets, /v4/rockets/{id}
- GET /v4/crew
- HTTP/네트워크 오류는 SpaceXApiError로 통일
"""

from typing import Optional, Type, TypeVar
from loguru import logger
import httpx
from pydantic import BaseModel, ValidationError

from rocketlens.config import settings
from rocketlens.schemas.crew import CrewDto
from rocketlens.schemas.rocket import RocketDto

DtoT = TypeVar("DtoT", bound=BaseModel)


class SpaceXApiError(Exception):
    """SpaceX API 호출 실패 (HTTP 오류면 status_code 포함)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SpaceXClient:
    """
    SpaceX REST API 클라이언트

    with 문으로 사용합니다:
        with SpaceXClient() as client:
            rockets = client.get_rockets()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or settings.SPACEX_API_URL).rstrip("/")
        self.client = httpx.Client(
            headers=settings.SPACEX_API_HEADERS,
            timeout=timeout or settings.SPACEX_API_TIMEOUT,
            transport=transport,
        )
        self.logger = logger.bind(source="SpaceXApi")

    def _request(self, path: str):
        url = f"{self.base_url}{path}"

        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            self.logger.error(f"Request failed: {e}")
            raise SpaceXApiError(f"SpaceX API 요청 실패: {e}") from e

        if response.status_code != 200:
            self.logger.warning(f"HTTP error: {response.status_code} ({url})")
            raise SpaceXApiError(
                f"SpaceX API 오류 (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON from {url}: {e}")
            raise SpaceXApiError("SpaceX API 응답을 해석할 수 없습니다.") from e

    def get_rockets(self) -> list[RocketDto]:
        """전체 로켓 목록 조회"""
        self.logger.info("Fetching rockets list")
        rockets = self._get_list("/rockets", RocketDto)
        self.logger.info(f"Fetched {len(rockets)} rockets")
        return rockets

    def get_rocket(self, rocket_id: str) -> RocketDto:
        """로켓 한 개 상세 조회"""
        self.logger.info(f"Fetching rocket {rocket_id}")
        data = self._request(f"/rockets/{rocket_id}")

        rocket = self._parse(data, RocketDto)
        if rocket is None:
            raise SpaceXApiError(f"로켓 정보를 해석할 수 없습니다: {rocket_id}")
        return rocket

    def get_crew(self) -> list[CrewDto]:
        """전체 크루 목록 조회"""
        self.logger.info("Fetching crew list")
        crew = self._get_list("/crew", CrewDto)
        self.logger.info(f"Fetched {len(crew)} crew members")
        return crew

    def _get_list(self, path: str, dto_type: Type[DtoT]) -> list[DtoT]:
        data = self._request(path)

        if not isinstance(data, list):
            raise SpaceXApiError("SpaceX API 응답 형식이 올바르지 않습니다 (list 아님).")

        items = []
        for item in data:
            parsed = self._parse(item, dto_type)
            if parsed:
                items.append(parsed)
        return items

    def _parse(self, item, dto_type: Type[DtoT]) -> Optional[DtoT]:
        """API 응답 항목을 DTO로 변환 (실패 시 None)"""
        try:
            return dto_type.model_validate(item)
        except ValidationError as e:
            self.logger.warning(f"Parse error: {e}")
            return None

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
