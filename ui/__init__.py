"""
RocketLens Streamlit UI 패키지
"""
