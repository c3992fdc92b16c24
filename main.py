# main.py
# CLAIM DOCUMENT GENERATOR
# Streamlit page: client details form + document generation buttons

import asyncio

import streamlit as st

from src.clients import ClientForm
from src.config import get_settings
from src.documents import DOCUMENT_NAMES, DOCUMENT_ORDER, DocumentType, use_system_locale
from src.export import CollectingSink
from src.generation import generate_all, generate_selection
from src.logging_config import configure_logging

# ---------------------------------------------------------
# 1. SETUP & CONFIG
# ---------------------------------------------------------
st.set_page_config(page_title="Legal Document Generator", page_icon="⚖️", layout="wide")

settings = get_settings()
configure_logging(settings.log_level, settings.log_json)
use_system_locale()

FIELD_LABELS = {
    "name": ("Full Name", "Enter client's full name"),
    "email": ("Email Address", "Enter client's email"),
    "phone_number": ("Phone Number", "Enter client's phone number"),
    "identification_number": ("Identification Number", "Enter client's ID number"),
}

DOCUMENT_HINTS = {
    DocumentType.WARRANT: "Authorization letter",
    DocumentType.CONSENT: "Release of medical info",
    DocumentType.DEMAND: "Claim initiation letter",
    DocumentType.NOTICE: "Pre-litigation notice",
}

if "form" not in st.session_state:
    st.session_state.form = ClientForm()
if "result" not in st.session_state:
    st.session_state.result = None
if "downloads" not in st.session_state:
    st.session_state.downloads = []

form: ClientForm = st.session_state.form


def on_field_change(field: str):
    form.update_field(field, st.session_state[f"field_{field}"])


def run_action(action, *args):
    """Validate, generate into memory, and keep the result for display."""
    if not form.validate():
        st.session_state.result = None
        return

    sink = CollectingSink()
    result = asyncio.run(action(form.snapshot(), *args, sink=sink, download_delay_seconds=settings.download_delay_seconds))

    st.session_state.result = result
    st.session_state.downloads = sink.downloads


# ---------------------------------------------------------
# 2. INTERFACE
# ---------------------------------------------------------
st.title("⚖️ Legal Document Generator")
st.markdown(
    "Streamline your motor vehicle accident claims with automated document generation. "
    "Enter client details and generate professional legal documents instantly."
)
st.divider()

st.subheader("Client Information")
col1, col2 = st.columns(2)
for i, (field, (label, placeholder)) in enumerate(FIELD_LABELS.items()):
    with (col1 if i % 2 == 0 else col2):
        st.text_input(
            label,
            value=form.get(field),
            placeholder=placeholder,
            key=f"field_{field}",
            on_change=on_field_change,
            args=(field,),
        )
        if field in form.errors:
            st.caption(f":red[{form.errors[field]}]")

st.subheader("Document Generation")
cols = st.columns(4)
for col, doc_type in zip(cols, DOCUMENT_ORDER):
    with col:
        st.button(
            DOCUMENT_NAMES[doc_type],
            help=DOCUMENT_HINTS[doc_type],
            use_container_width=True,
            on_click=run_action,
            args=(generate_selection, [doc_type]),
        )

st.multiselect(
    "Documents to bundle",
    options=DOCUMENT_ORDER,
    format_func=lambda d: DOCUMENT_NAMES[d],
    key="selected",
)
st.button("Generate Selected", on_click=lambda: run_action(generate_selection, st.session_state.selected))

st.button(
    "Generate All Documents",
    type="primary",
    use_container_width=True,
    on_click=run_action,
    args=(generate_all,),
)

# ---------------------------------------------------------
# 3. DOCUMENT STATUS
# ---------------------------------------------------------
result = st.session_state.result
if result is not None and not result.success and not result.errors:
    st.warning(result.message)

if result is not None and result.success:
    st.success("Documents Generated Successfully")
    st.markdown("The following documents have been generated:")
    for name in result.document_names:
        st.markdown(f"- 📄 {name}")

    for download in st.session_state.downloads:
        st.download_button(
            f"Download {download.filename}",
            data=download.content,
            file_name=download.filename,
            mime=download.mime_type,
            key=f"download_{download.filename}",
        )
