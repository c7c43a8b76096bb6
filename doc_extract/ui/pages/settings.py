import streamlit as st
from doc_extract.core.config_loader import get_limits
from doc_extract.ui.state import AppState

def render(app_state: AppState):
    st.title("Settings")

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Environment", app_state.env)
    with col2:
        st.metric("Config", app_state.config.get("status", "UNKNOWN"))

    st.caption(f"Source: {app_state.config.get('source')}")
    st.caption(f"Path: {app_state.config.get('config_path')}")

    st.subheader("Limits")
    st.json(get_limits(app_state.data))

    st.subheader("Extraction")
    st.json(app_state.data.get("features", {}).get("extraction", {}))
