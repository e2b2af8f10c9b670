#!/usr/bin/env python
"""
RocketLens 캐시 관리 CLI

사용법:
    python scripts/cache_cli.py status          # 캐시 상태 확인
    python scripts/cache_cli.py detail          # 캐시 상세 정보
    python scripts/cache_cli.py clear           # 전체 캐시 삭제
    python scripts/cache_cli.py clear-expired   # 만료된 캐시만 삭제
    python scripts/cache_cli.py warm            # API에서 로켓/크루 다시 받아 캐시 갱신
"""

import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rocketlens.data_sources import (
    get_cache_manager,
    CrewRepository,
    CrewFetchError,
    RocketsRepository,
    RocketsFetchError,
)


def cmd_status():
    """캐시 상태 간단히 출력"""
    cache = get_cache_manager()
    stats = cache.get_stats()

    print("=" * 40)
    print("📦 RocketLens 캐시 상태")
    print("=" * 40)
    print(f"  저장된 캐시: {stats['count']}개")
    print(f"  총 용량: {stats['size_kb']}KB")
    print(f"  캐시 위치: {cache.cache_dir}")
    print("=" * 40)


def cmd_detail():
    """캐시 상세 정보 출력"""
    detailed = get_cache_manager().get_detailed_stats()

    print("=" * 60)
    print("📊 RocketLens 캐시 상세 정보")
    print("=" * 60)

    if not detailed:
        print("  (캐시 없음)")
        return

    print(f"{'리소스':<10} {'항목수':<8} {'저장시간':<16} {'남은시간':<12} {'용량':<8}")
    print("-" * 60)

    for item in detailed:
        status = "❌" if item["expired"] else "✅"
        print(
            f"{status} {item['resource']:<8} "
            f"{item['items']:<8} "
            f"{item['cached_at']:<16} "
            f"{item['expires_in']:<12} "
            f"{item['size_kb']}KB"
        )

    print("=" * 60)


def cmd_clear():
    """전체 캐시 삭제"""
    count = get_cache_manager().clear()
    print(f"🗑️  전체 캐시 {count}개 삭제됨")


def cmd_clear_expired():
    """만료된 캐시만 삭제"""
    count = get_cache_manager().clear_expired()

    if count > 0:
        print(f"⏰ 만료된 캐시 {count}개 삭제됨")
    else:
        print("✅ 만료된 캐시 없음")


def cmd_warm() -> int:
    """API에서 로켓/크루 목록을 다시 받아 캐시 갱신"""
    try:
        rockets = RocketsRepository().get_rockets_list(refresh=True)
        crew = CrewRepository().get_crew(refresh=True)
    except (RocketsFetchError, CrewFetchError) as e:
        print(f"❌ 캐시 갱신 실패: {e}")
        return 1

    print(f"🚀 로켓 {len(rockets)}개, 👩‍🚀 크루 {len(crew)}명 캐시됨")
    return 0


def print_help():
    """도움말 출력"""
    print(__doc__)


def main() -> int:
    if len(sys.argv) < 2:
        print_help()
        return 0

    command = sys.argv[1].lower()

    if command == "status":
        cmd_status()
    elif command == "detail":
        cmd_detail()
    elif command == "clear":
        cmd_clear()
    elif command == "clear-expired":
        cmd_clear_expired()
    elif command == "warm":
        return cmd_warm()
    elif command in ["help", "-h", "--help"]:
        print_help()
    else:
        print(f"❌ 알 수 없는 명령: {command}")
        print_help()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
