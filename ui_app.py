"""Streamlit UI for the Sheet Studio spreadsheet viewer."""
from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from sheetstudio import (
    Notification,
    ViewerState,
    build_bar_chart,
    build_line_chart,
    grid_to_frame,
    load_config,
)
from sheetstudio.config import DEFAULT_CONFIG_PATH
from sheetstudio.export import XLSX_MIME

st.set_page_config(page_title="Excel Калькулятор", layout="wide")

CONFIG = load_config(DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None)
logging.basicConfig(
    level=getattr(logging, CONFIG.logging.level, logging.INFO),
    format=CONFIG.logging.format,
)

STATE_KEY = "viewer_state"
UPLOAD_KEY = "upload_signature"
NOTIFICATION_KEY = "pending_notification"


def _state() -> ViewerState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = ViewerState(config=CONFIG)
    return st.session_state[STATE_KEY]


def _notify(notification: Optional[Notification]) -> None:
    if notification is None:
        return
    if notification.is_error:
        st.error(f"**{notification.title}**: {notification.description}")
    st.toast(
        f"**{notification.title}**\n\n{notification.description}",
        icon="⚠️" if notification.is_error else "✅",
    )


def _handle_upload(state: ViewerState, uploaded) -> None:
    signature = (uploaded.name, uploaded.size)
    if st.session_state.get(UPLOAD_KEY) == signature:
        return
    st.session_state[UPLOAD_KEY] = signature
    with st.spinner("Читаю файл..."):
        notification = state.handle_upload(uploaded.getvalue(), uploaded.name)
    st.session_state[NOTIFICATION_KEY] = notification
    st.rerun()


def _sheet_switcher(state: ViewerState) -> None:
    names = state.sheet_names
    if len(names) < 2:
        return
    cols = st.columns(len(names))
    for col, name in zip(cols, names):
        if col.button(
            name,
            key=f"sheet::{name}",
            type="primary" if name == state.active_sheet else "secondary",
            use_container_width=True,
        ):
            state.select_sheet(name)
            st.rerun()


def _charts(state: ViewerState) -> None:
    if not state.chart_sample:
        return
    bar_col, line_col = st.columns(2)
    with bar_col:
        st.subheader("Столбчатая диаграмма")
        st.plotly_chart(build_bar_chart(state.chart_sample, CONFIG.chart), use_container_width=True)
    with line_col:
        st.subheader("Линейный график")
        st.plotly_chart(build_line_chart(state.chart_sample, CONFIG.chart), use_container_width=True)


state = _state()
_notify(st.session_state.pop(NOTIFICATION_KEY, None))

accepted = " или ".join(CONFIG.ingest.accepted_extensions)
with st.sidebar:
    st.header("Файл")
    # no type= filter: ViewerState.handle_upload reports the wrong format
    uploaded = st.file_uploader(
        f"Перетащите {accepted} файл сюда или нажмите кнопку для выбора",
    )
    if uploaded is not None:
        _handle_upload(state, uploaded)

title_col, action_col = st.columns([4, 1])
with title_col:
    st.title("Excel Калькулятор")
    if state.file_name:
        st.caption(state.file_name)

if not state.has_data:
    st.info("➡️ Загрузите Excel файл в левой панели.")
    st.stop()

with action_col:
    export_name, export_payload, export_notification = state.handle_export()
    if st.download_button(
        "Экспортировать",
        data=export_payload,
        file_name=export_name,
        mime=XLSX_MIME,
    ):
        _notify(export_notification)

_sheet_switcher(state)
st.dataframe(grid_to_frame(state.current_grid), use_container_width=True)
_charts(state)
