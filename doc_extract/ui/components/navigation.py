import streamlit as st
from typing import Dict, Callable
from doc_extract.ui.state import AppState

def render_sidebar(app_state: AppState, page_map: Dict[str, Callable[[AppState], None]]):
    """
    Renders the sidebar navigation and executes the selected page's render function.

    Args:
        app_state: The application state object.
        page_map: Dictionary mapping display names to page render functions.
    """
    st.sidebar.title("Doc Extract")
    st.sidebar.caption(f"Env: {app_state.env}")

    selection = st.sidebar.radio("Navigation", list(page_map.keys()))

    st.sidebar.divider()
    if app_state.config_ok:
        st.sidebar.success("Config OK")
    else:
        st.sidebar.error(f"Config Error: {app_state.config.get('error')}")

    if selection and selection in page_map:
        page_map[selection](app_state)
