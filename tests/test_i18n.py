from __future__ import annotations

import pytest

from tzconvert.i18n import day_diff_label, t


@pytest.mark.unit
def test_t_falls_back_to_english_then_key() -> None:
    assert t("page_title", "ko") == "세계 시간 변환기"
    assert t("page_title", "fr") == "Timezone Converter"
    assert t("no_such_key", "en") == "no_such_key"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("diff", "lang", "expected"),
    [
        (0, "en", ""),
        (1, "en", "1 day later"),
        (3, "en", "3 days later"),
        (-1, "en", "1 day earlier"),
        (-2, "ko", "2일 전"),
    ],
)
def test_day_diff_label(diff: int, lang: str, expected: str) -> None:
    assert day_diff_label(diff, lang) == expected


@pytest.mark.unit
def test_pending_reads_as_waiting_in_both_languages() -> None:
    assert t("pending", "en") == "Pending"
    assert t("pending", "ko") == "대기 중"
