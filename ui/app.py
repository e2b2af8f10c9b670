"""
RocketLens Streamlit UI
- 로켓 목록 조회 (캐시 우선)
- 이름 검색 + 카테고리별 필터 칩
"""

import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# 프로젝트 루트를 path에 추가 (ui 패키지 import용)
sys.path.insert(0, str(Path(__file__).parent.parent))

from rocketlens.config import settings
from rocketlens.data_sources import CrewFetchError, get_cache_manager
from rocketlens.pipeline import (
    RocketsListViewModel,
    RefreshRockets,
    RetryLoadRockets,
    SearchQueryChanged,
    FilterChipToggled,
    RocketClicked,
    RocketDetailsClosed,
    ConsumeError,
    RocketDetailViewModel,
    LoadRocketDetail,
)
from rocketlens.schemas import PARAM_UNIT, FilterItem, StageDetail
from rocketlens.usecases import GetCrewListUseCase
from ui.strings import resolve

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)

st.set_page_config(
    page_title="RocketLens - SpaceX 로켓 목록",
    page_icon="🚀",
    layout="wide",
)

# Session State 초기화
if "view_model" not in st.session_state:
    st.session_state.view_model = RocketsListViewModel()


def show_cache_status():
    """캐시 상태 표시 및 관리"""
    cache = get_cache_manager()
    stats = cache.get_stats()
    st.sidebar.markdown("---")
    st.sidebar.subheader("📦 캐시 관리")
    st.sidebar.caption(f"💾 {stats['count']}개 ({stats['size_kb']}KB)")

    if stats["count"] > 0:
        with st.sidebar.expander("📊 상세 보기"):
            for item in cache.get_detailed_stats():
                status_emoji = "🔴" if item["expired"] else "🟢"
                st.caption(
                    f"{status_emoji} **{item['resource']}** | {item['items']}건 | {item['expires_in']} 남음"
                )

    col1, col2 = st.sidebar.columns(2)
    with col1:
        if st.button("🗑️ 전체 삭제", use_container_width=True):
            count = cache.clear()
            st.sidebar.success(f"{count}개 삭제됨")
    with col2:
        if st.button("⏰ 만료만", use_container_width=True):
            count = cache.clear_expired()
            if count > 0:
                st.sidebar.success(f"{count}개 삭제됨")
            else:
                st.sidebar.info("만료 캐시 없음")


def render_filter(view_model: RocketsListViewModel, item: FilterItem):
    """카테고리 하나의 필터 칩"""
    unit = resolve(item.extra_params.get(PARAM_UNIT))
    label = resolve(item.display_name)
    if unit:
        label = f"{label} ({unit})"

    current = view_model.state.active_filters.get(item.key)
    selection = st.multiselect(
        label,
        options=item.values,
        default=[value for value in item.values if value in current],
        format_func=lambda value: resolve(value.display_name),
        key=f"filter_{item.key}",
    )

    selected = set(selection)
    for value in selected - current:
        view_model.process_intent(FilterChipToggled(filter_key=item.key, filter_value=value, is_selected=True))
    for value in current - selected:
        view_model.process_intent(FilterChipToggled(filter_key=item.key, filter_value=value, is_selected=False))


def render_rockets(view_model: RocketsListViewModel):
    """필터링된 로켓 목록"""
    state = view_model.state
    st.caption(f"{len(state.filtered_rockets)} / {len(state.rockets)} 로켓")

    if not state.filtered_rockets:
        st.info("조건에 맞는 로켓이 없습니다.")
        return

    for rocket in state.filtered_rockets:
        with st.container(border=True):
            title_col, button_col = st.columns([4, 1])
            title_col.markdown(f"**{rocket.name}**")
            if button_col.button("상세 보기", key=f"detail_{rocket.id}", use_container_width=True):
                view_model.process_intent(RocketClicked(rocket_id=rocket.id))
                st.rerun()

            col1, col2, col3, col4 = st.columns(4)
            col1.metric("첫 비행", rocket.first_flight)
            col2.metric("높이", f"{rocket.height:.1f} m")
            col3.metric("지름", f"{rocket.diameter:.1f} m")
            col4.metric("질량", f"{rocket.mass:,} kg")


def render_stage(title: str, stage: StageDetail):
    """1단/2단 정보"""
    st.markdown(f"**{title}**")
    st.caption(f"재사용: {'예' if stage.reusable else '아니오'}")
    st.caption(f"엔진: {stage.engines}개")
    st.caption(f"연료: {stage.fuel_amount_tons:.1f} t")
    st.caption(f"연소 시간: {stage.burn_time_sec}초")


def render_rocket_detail(list_view_model: RocketsListViewModel, rocket_id: str):
    """로켓 상세 화면"""
    detail_models = st.session_state.setdefault("detail_view_models", {})
    if rocket_id not in detail_models:
        detail_models[rocket_id] = RocketDetailViewModel(rocket_id)
    view_model: RocketDetailViewModel = detail_models[rocket_id]

    if st.button("← 목록으로"):
        list_view_model.process_intent(RocketDetailsClosed())
        st.rerun()

    state = view_model.state
    if state.error:
        st.error(resolve(state.error))
        if st.button("다시 시도"):
            view_model.process_intent(LoadRocketDetail())
            st.rerun()
        return

    detail = state.detail
    if detail is None:
        return

    st.header(detail.name)
    st.write(detail.description)

    col1, col2, col3 = st.columns(3)
    col1.metric("높이", f"{detail.height:.1f} m")
    col2.metric("지름", f"{detail.diameter:.1f} m")
    col3.metric("질량", f"{detail.mass:,} kg")

    stage_col1, stage_col2 = st.columns(2)
    with stage_col1:
        render_stage("1단", detail.first_stage)
    with stage_col2:
        render_stage("2단", detail.second_stage)

    if detail.images:
        st.image(detail.images, width=300)


def render_crew():
    """크루 목록 탭"""
    try:
        crew = GetCrewListUseCase().run(False)
    except CrewFetchError as e:
        st.error(f"크루 정보를 불러오지 못했습니다: {e}")
        return

    st.caption(f"{len(crew)}명")
    for member in crew:
        with st.container(border=True):
            st.markdown(f"**{member.name}** · {member.agency}")
            st.caption(f"상태: {member.status}")
            if member.wikipedia:
                st.markdown(f"[Wikipedia]({member.wikipedia})")


def main():
    view_model: RocketsListViewModel = st.session_state.view_model

    st.title("🚀 RocketLens")

    state = view_model.state
    if state.selected_rocket_id:
        render_rocket_detail(view_model, state.selected_rocket_id)
        return

    if state.error:
        st.error(resolve(state.error))
        col1, col2 = st.columns(2)
        if col1.button("다시 시도"):
            view_model.process_intent(RetryLoadRockets())
            st.rerun()
        if col2.button("확인"):
            view_model.process_intent(ConsumeError())
            st.rerun()

    with st.sidebar:
        st.header("🔍 검색 조건")
        if st.button("🔄 새로고침", use_container_width=True):
            view_model.process_intent(RefreshRockets())
            # 위젯 상태도 함께 초기화
            for key in list(st.session_state.keys()):
                if key == "search_query" or str(key).startswith("filter_"):
                    del st.session_state[key]
            st.rerun()

        query = st.text_input("로켓 이름", value=view_model.state.search_query, key="search_query")
        if query != view_model.state.search_query:
            view_model.process_intent(SearchQueryChanged(query=query))

        for item in view_model.state.available_filters:
            render_filter(view_model, item)

    show_cache_status()

    tab1, tab2 = st.tabs(["🚀 로켓", "👩‍🚀 크루"])
    with tab1:
        render_rockets(view_model)
    with tab2:
        render_crew()


if __name__ == "__main__":
    main()
