"""HTML result cards for embedding via st.markdown(unsafe_allow_html=True).

Every user-visible string is escaped; city names come from the catalogue or a
free-form map pick.
"""

import html

from tzconvert.i18n import day_diff_label, t
from tzconvert.models import ConversionRow

_ACCENT = "#7ec8e3"
_MUTED = "#8a94a6"


def render_result_card(row: ConversionRow, lang: str = "en") -> str:
    """Return an HTML snippet for one target row.

    A pending row (result is None) shows the placeholder text instead of a time.

    Args:
        row: Target city and its conversion result.
        lang: Language code ('ko' or 'en') for labels.

    Returns:
        HTML string.
    """
    place = html.escape(row.city.label)
    if row.result is None:
        time_html = f"<span style='color:{_MUTED};'>{html.escape(t('pending', lang))}</span>"
        diff_html = ""
    else:
        time_html = (
            f"<span class='result-time' style='font-family:monospace;font-size:1.15rem;"
            f"font-weight:600;'>{html.escape(row.result.converted)}</span>"
        )
        label = day_diff_label(row.result.day_diff, lang)
        diff_html = (
            f"<div class='result-diff' style='color:{_ACCENT if row.result.day_diff > 0 else _MUTED};"
            f"font-size:0.85rem;'>{html.escape(label)}</div>"
            if label
            else ""
        )

    return (
        "<div class='result-card' style='display:flex;justify-content:space-between;"
        "align-items:center;padding:0.75rem;border:1px solid rgba(255,255,255,0.12);"
        "border-radius:8px;margin-bottom:0.5rem;'>"
        f"<div>{time_html}{diff_html}</div>"
        f"<span class='result-place' style='color:{_MUTED};font-size:0.85rem;text-align:right;'>"
        f"{place}</span>"
        "</div>"
    )


def render_result_header(place: str, when: str, lang: str = "en") -> str:
    """Sentence above the cards: "At New York on 02/02/2026 (Mon) at 12:00 PM, it's:"."""
    text = t("result_header", lang).format(
        place=f"<b>{html.escape(place)}</b>", when=f"<b>{html.escape(when)}</b>"
    )
    return f"<p class='result-header'>{text}</p>"
