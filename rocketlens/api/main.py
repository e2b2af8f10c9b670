"""
RocketLens FastAPI 메인
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rocketlens import __version__
from rocketlens.api.routes import router
from rocketlens.config import settings

app = FastAPI(
    title="RocketLens",
    description="SpaceX 로켓 목록 검색 및 필터링",
    version=__version__,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """헬스 체크"""
    return {
        "name": "RocketLens",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
def health():
    """상세 헬스 체크"""
    from rocketlens.data_sources import get_cache_manager

    stats = get_cache_manager().get_stats()

    return {
        "status": "healthy",
        "env": settings.ENV,
        "cache_files": stats["count"],
    }
