"""
캐시 매니저
API 응답을 파일 기반으로 캐싱합니다.
"""

import json
import hashlib
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Any
from loguru import logger

from rocketlens.config import settings


class CacheManager:
    """
    로켓 데이터 캐시 관리
    - 요청 파라미터별 JSON 파일
    - TTL 기반 만료
    """

    def __init__(
        self,
        cache_dir: Optional[str] = None,
        ttl_hours: Optional[int] = None,
    ):
        self.cache_dir = Path(cache_dir or settings.CACHE_DIR)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.ttl = timedelta(hours=ttl_hours if ttl_hours is not None else settings.CACHE_TTL_HOURS)
        self.logger = logger.bind(source="CacheManager")

    def _get_cache_key(self, params: dict) -> str:
        """파라미터로 캐시 키 생성"""
        param_str = json.dumps(params, sort_keys=True)
        return hashlib.md5(param_str.encode()).hexdigest()

    def _get_cache_path(self, cache_key: str) -> Path:
        return self.cache_dir / f"{cache_key}.json"

    def _read(self, cache_path: Path) -> dict:
        with open(cache_path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _is_expired(self, cached: dict) -> bool:
        cached_at = datetime.fromisoformat(cached["cached_at"])
        return datetime.now() - cached_at > self.ttl

    def get(self, params: dict) -> Optional[Any]:
        """
        캐시에서 데이터 조회

        Returns:
            캐시된 데이터 또는 None (만료/미존재/읽기 실패)
        """
        cache_key = self._get_cache_key(params)
        cache_path = self._get_cache_path(cache_key)

        if not cache_path.exists():
            return None

        try:
            cached = self._read(cache_path)

            if self._is_expired(cached):
                self.logger.debug(f"Cache expired: {cache_key[:8]}...")
                cache_path.unlink()
                return None

            self.logger.info(f"Cache hit: {params.get('resource', 'unknown')}")
            return cached["data"]

        except (OSError, ValueError, KeyError) as e:
            self.logger.warning(f"Cache read error: {e}")
            return None

    def set(self, params: dict, data: Any):
        """캐시에 데이터 저장"""
        cache_key = self._get_cache_key(params)
        cache_path = self._get_cache_path(cache_key)

        try:
            cached = {
                "cached_at": datetime.now().isoformat(),
                "params": params,
                "data": data,
            }

            with open(cache_path, "w", encoding="utf-8") as f:
                json.dump(cached, f, ensure_ascii=False, indent=2)

            self.logger.debug(f"Cache saved: {cache_key[:8]}...")

        except (OSError, TypeError, ValueError) as e:
            self.logger.warning(f"Cache write error: {e}")

    def delete(self, params: dict) -> bool:
        """특정 파라미터의 캐시 삭제"""
        cache_path = self._get_cache_path(self._get_cache_key(params))
        if cache_path.exists():
            cache_path.unlink()
            return True
        return False

    def clear(self) -> int:
        """전체 캐시 삭제"""
        count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            cache_file.unlink()
            count += 1
        self.logger.info(f"Cache cleared: {count} files")
        return count

    def clear_expired(self) -> int:
        """만료된 캐시만 삭제"""
        count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            try:
                expired = self._is_expired(self._read(cache_file))
            except (OSError, ValueError, KeyError):
                # 파싱 실패한 파일도 삭제
                expired = True

            if expired:
                cache_file.unlink()
                count += 1
        self.logger.info(f"Expired cache cleared: {count} files")
        return count

    def get_stats(self) -> dict:
        """캐시 통계"""
        files = list(self.cache_dir.glob("*.json"))
        total_size = sum(f.stat().st_size for f in files)

        return {
            "count": len(files),
            "size_kb": round(total_size / 1024, 1),
        }

    def get_detailed_stats(self) -> list[dict]:
        """캐시 상세 정보 (리소스별, 만료시간 포함)"""
        result = []
        for cache_file in self.cache_dir.glob("*.json"):
            try:
                cached = self._read(cache_file)
                cached_at = datetime.fromisoformat(cached["cached_at"])
            except (OSError, ValueError, KeyError) as e:
                self.logger.debug(f"Skipping unreadable cache file {cache_file.name}: {e}")
                continue

            remaining = cached_at + self.ttl - datetime.now()
            params = cached.get("params", {})
            data = cached.get("data", [])

            result.append({
                "resource": params.get("resource", "unknown"),
                "items": len(data) if isinstance(data, list) else 0,
                "cached_at": cached_at.strftime("%Y-%m-%d %H:%M"),
                "remaining_seconds": int(remaining.total_seconds()),
                "expires_in": self._format_timedelta(remaining),
                "expired": remaining.total_seconds() < 0,
                "size_kb": round(cache_file.stat().st_size / 1024, 1),
            })

        # 만료 임박 순으로 정렬
        result.sort(key=lambda x: x["remaining_seconds"])
        return result

    def _format_timedelta(self, td: timedelta) -> str:
        """timedelta를 읽기 좋은 문자열로 변환"""
        total_seconds = int(td.total_seconds())
        if total_seconds < 0:
            return "만료됨"

        hours, remainder = divmod(total_seconds, 3600)
        minutes, _ = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}시간 {minutes}분"
        return f"{minutes}분"


# 글로벌 인스턴스
_cache_manager: CacheManager | None = None


def get_cache_manager() -> CacheManager:
    """싱글톤 캐시 매니저 반환"""
    global _cache_manager
    if _cache_manager is None:
        _cache_manager = CacheManager()
    return _cache_manager
