import asyncio
import streamlit as st
from doc_extract.core.extractors.dispatcher import SUPPORTED_EXTENSIONS
from doc_extract.core.upload_service import UploadService
from doc_extract.core.validation import sanitize_transcript_text
from doc_extract.ui.state import AppState

def render(app_state: AppState):
    st.title("Extract Text")

    if not app_state.config_ok:
        st.error(f"Config Error: {app_state.config.get('error')}")
        return

    check_content = st.checkbox("Apply transcript length checks", value=True)
    sanitize = st.checkbox("Collapse whitespace and strip control characters", value=False)
    uploaded = st.file_uploader(
        "Upload a document",
        type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
    )
    if uploaded is None:
        st.info(f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}")
        return

    service = UploadService(app_state.data, check_content=check_content)
    with st.spinner(f"Extracting text from {uploaded.name}..."):
        result = asyncio.run(service.process(uploaded.getvalue(), uploaded.name, uploaded.type))

    if not result.success:
        st.error(result.error)
        return

    text = sanitize_transcript_text(result.text) if sanitize else result.text

    st.success(f"Extracted {len(text.split())} words")
    st.text_area("Text", text, height=400)
    st.download_button("Download .txt", text, file_name=f"{uploaded.name}.txt", mime="text/plain")
