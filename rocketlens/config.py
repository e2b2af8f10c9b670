"""
RocketLens 설정 관리

모든 설정값은 .env 파일에서 관리합니다.
사용법:
    from rocketlens.config import settings
    url = settings.SPACEX_API_URL
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # .env에 정의되지 않은 변수 무시
    )

    # === 환경 ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === SpaceX API ===
    SPACEX_API_URL: str = "https://api.spacexdata.com/v4"
    SPACEX_API_TIMEOUT: int = 30

    SPACEX_API_HEADERS: dict = {
        "Accept": "application/json",
        "User-Agent": "RocketLens/0.1.0",
    }

    # === 캐시 ===
    CACHE_DIR: str = ".cache/rockets"
    CACHE_TTL_HOURS: int = 24


# 싱글톤 인스턴스
settings = Settings()
