"""Timezone Converter — Streamlit app comparing one local time across locations."""

import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from tzconvert.cities import city_from_coordinates, city_options, find_city  # noqa: E402
from tzconvert.convert import (  # noqa: E402
    convert_for_cities,
    current_time_in_timezone,
    format_datetime_input,
    format_source_datetime,
    is_valid_datetime,
)
from tzconvert.i18n import t  # noqa: E402
from tzconvert.models import City  # noqa: E402
from tzconvert.renderers.cards import render_result_card, render_result_header  # noqa: E402
from tzconvert.renderers.plotly_map import render_location_map  # noqa: E402
from tzconvert.settings import configure_logging, default_source_label  # noqa: E402

configure_logging()
logger = logging.getLogger(__name__)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in, at which point _lang is set correctly.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🌐",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "source" not in st.session_state:
    st.session_state.source = find_city(default_source_label())
if "date_time" not in st.session_state:
    st.session_state.date_time = ""
if "targets" not in st.session_state:
    st.session_state.targets = []

st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    [data-testid="stMainBlockContainer"] { max-width: 32rem; padding-top: 1.5rem !important; }
    .step-title { font-weight: 600; margin: 0.8rem 0 0.3rem; }
    .step-muted { color: #8a94a6; font-size: 0.9rem; }
    .result-header { line-height: 1.6; }
    </style>
    """,
    unsafe_allow_html=True,
)


def _label_with_time(label: str) -> str:
    city = find_city(label)
    if city is None:
        return label
    return f"{label} · {current_time_in_timezone(city.timezone)}"


def _mask_date_time() -> None:
    st.session_state.date_time = format_datetime_input(st.session_state.date_time)


# --- Header ---
st.markdown(f"## 🌐 {t('page_title', _lang)}")
st.caption(t("subtitle", _lang))

# --- Step 1: source location ---
st.markdown(f"<div class='step-title'>1. {t('step_location', _lang)}</div>", unsafe_allow_html=True)
source: City | None = st.session_state.source
source_query = st.text_input(t("label_search", _lang), key="source_query")
source_options = city_options(source_query, [source.label] if source is not None else [])
picked_label = st.selectbox(
    t("label_source", _lang),
    source_options,
    index=0 if source is not None else None,
    format_func=_label_with_time,
)
if picked_label is not None and (source is None or picked_label != source.label):
    st.session_state.source = find_city(picked_label)

with st.expander(t("label_pick_on_map", _lang)):
    lat_col, lng_col = st.columns(2)
    with lat_col:
        lat = st.number_input(t("label_lat", _lang), -90.0, 90.0, 0.0, format="%.4f")
    with lng_col:
        lng = st.number_input(t("label_lng", _lang), -180.0, 180.0, 0.0, format="%.4f")
    if st.button("OK", key="pick_coords"):
        picked = city_from_coordinates(lat, lng)
        if picked is None:
            st.warning(t("error_no_timezone", _lang))
        else:
            logger.info("Source picked by coordinates: %s", picked.timezone)
            st.session_state.source = picked

source = st.session_state.source

# --- Step 2: date/time ---
st.markdown(f"<div class='step-title'>2. {t('step_time', _lang)}</div>", unsafe_allow_html=True)
if source is None:
    st.markdown(f"<div class='step-muted'>{t('need_location', _lang)}</div>", unsafe_allow_html=True)
    date_time_valid = False
else:
    st.text_input(
        t("label_datetime", _lang),
        key="date_time",
        placeholder=t("datetime_placeholder", _lang),
        max_chars=22,
        on_change=_mask_date_time,
    )
    st.caption(t("datetime_hint", _lang))
    date_time_valid = is_valid_datetime(st.session_state.date_time)
    if st.session_state.date_time and not date_time_valid:
        st.error(t("error_datetime", _lang))

# --- Step 3: targets ---
st.markdown(f"<div class='step-title'>3. {t('step_targets', _lang)}</div>", unsafe_allow_html=True)
if source is None or not date_time_valid:
    st.markdown(f"<div class='step-muted'>{t('need_steps', _lang)}</div>", unsafe_allow_html=True)
    targets: list[City] = []
else:
    target_query = st.text_input(t("label_search", _lang), key="target_query")
    selected_labels = [c.label for c in st.session_state.targets]
    target_labels = st.multiselect(
        t("label_targets", _lang),
        city_options(target_query, selected_labels),
        default=selected_labels,
        format_func=_label_with_time,
    )
    targets = [c for c in (find_city(label) for label in target_labels) if c is not None]
    st.session_state.targets = targets

# --- Results ---
if source is not None and date_time_valid and targets:
    rows = convert_for_cities(st.session_state.date_time, source.timezone, targets)
    st.markdown(
        render_result_header(
            source.label, format_source_datetime(st.session_state.date_time), _lang
        ),
        unsafe_allow_html=True,
    )
    st.markdown("".join(render_result_card(row, _lang) for row in rows), unsafe_allow_html=True)

if source is not None:
    st.plotly_chart(
        render_location_map(source, targets),
        use_container_width=True,
        config={"displayModeBar": False},
    )

st.caption(t("footer", _lang))
