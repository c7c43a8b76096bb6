import streamlit as st
from doc_extract.core.config_loader import load_config
from doc_extract.core.logging_setup import configure_logging

class AppState:
    def __init__(self):
        # Load config only once per session
        if "app_config" not in st.session_state:
            st.session_state.app_config = load_config()
            configure_logging(st.session_state.app_config.get("data"))

        self.config = st.session_state.app_config

    @property
    def env(self) -> str:
        return self.config.get("env", "UNKNOWN")

    @property
    def data(self) -> dict:
        return self.config.get("data") or {}

    @property
    def config_ok(self) -> bool:
        return self.config.get("status") == "OK"

def init_app_state() -> AppState:
    return AppState()
