"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "세계 시간 변환기",
        "en": "Timezone Converter",
    },
    "subtitle": {
        "ko": "전 세계 시간을 한눈에",
        "en": "Convert times worldwide",
    },
    "step_location": {
        "ko": "위치 선택",
        "en": "Select Location",
    },
    "step_time": {
        "ko": "시간 선택",
        "en": "Select Time",
    },
    "step_targets": {
        "ko": "비교할 위치 추가",
        "en": "Add Locations to Compare",
    },
    "label_source": {
        "ko": "출발 위치",
        "en": "Source Location",
    },
    "label_datetime": {
        "ko": "날짜와 시간",
        "en": "Date & Time",
    },
    "label_targets": {
        "ko": "위치 추가",
        "en": "Add Location",
    },
    "label_search": {
        "ko": "도시 또는 국가 검색",
        "en": "Search city or country",
    },
    "label_pick_on_map": {
        "ko": "좌표로 위치 지정",
        "en": "Pick by coordinates",
    },
    "label_lat": {
        "ko": "위도",
        "en": "Latitude",
    },
    "label_lng": {
        "ko": "경도",
        "en": "Longitude",
    },
    "datetime_placeholder": {
        "ko": "MM/DD/YYYY HH:MM AM/PM",
        "en": "MM/DD/YYYY HH:MM AM/PM",
    },
    "datetime_hint": {
        "ko": "숫자와 A/P를 입력하세요 (예: 12252024330P)",
        "en": "Type digits + A/P (e.g., 12252024330P)",
    },
    "error_datetime": {
        "ko": "날짜와 시간 형식이 올바르지 않아요.",
        "en": "Enter a valid date and time.",
    },
    "error_no_timezone": {
        "ko": "이 좌표에는 시간대가 없어요.",
        "en": "No timezone found at these coordinates.",
    },
    "need_location": {
        "ko": "먼저 위치를 선택하세요",
        "en": "Select a location first",
    },
    "need_steps": {
        "ko": "1, 2단계를 먼저 완료하세요",
        "en": "Complete steps 1 and 2 first",
    },
    "result_header": {
        "ko": "{place}에서 {when}일 때:",
        "en": "At {place} on {when}, it's:",
    },
    "pending": {
        "ko": "대기 중",
        "en": "Pending",
    },
    "day_later": {
        "ko": "{n}일 후",
        "en": "{n} day later",
    },
    "days_later": {
        "ko": "{n}일 후",
        "en": "{n} days later",
    },
    "day_earlier": {
        "ko": "{n}일 전",
        "en": "{n} day earlier",
    },
    "days_earlier": {
        "ko": "{n}일 전",
        "en": "{n} days earlier",
    },
    "footer": {
        "ko": "서머타임과 날짜변경선을 반영합니다",
        "en": "Handles DST & International Date Line",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def day_diff_label(diff: int, lang: str) -> str:
    """Translated day-offset phrase; empty for the same day."""
    if diff == 0:
        return ""
    n = abs(diff)
    direction = "later" if diff > 0 else "earlier"
    key = f"day_{direction}" if n == 1 else f"days_{direction}"
    return t(key, lang).format(n=n)
