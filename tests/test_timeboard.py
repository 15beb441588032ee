from __future__ import annotations

import pytest
from typer.testing import CliRunner

from tzconvert.timeboard import app

runner = CliRunner()


@pytest.mark.unit
def test_board_prints_each_target() -> None:
    result = runner.invoke(
        app,
        ["--from", "America/New_York", "--when", "02/02/2026 10:00 PM", "Asia/Dubai", "UTC"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "America/New_York: 02/02/2026 (Mon) at 10:00 PM",
        "Asia/Dubai: 02/03/2026 (Tue) at 7:00 AM (1 day later)",
        "UTC: 02/03/2026 (Tue) at 3:00 AM (1 day later)",
    ]


@pytest.mark.unit
def test_board_accepts_city_labels() -> None:
    result = runner.invoke(
        app,
        ["--from", "Dubai, United Arab Emirates", "--when", "02/02/2026 12:30 AM", "London, United Kingdom"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[-1] == (
        "London, United Kingdom: 02/01/2026 (Sun) at 8:30 PM (1 day earlier)"
    )


@pytest.mark.unit
def test_board_unknown_target_is_pending() -> None:
    result = runner.invoke(
        app, ["--from", "UTC", "--when", "02/02/2026 12:00 PM", "Not/AZone"]
    )
    assert result.exit_code == 0
    assert "Not/AZone: --" in result.output.splitlines()


@pytest.mark.unit
@pytest.mark.parametrize(
    ("source", "when"),
    [("UTC", "2/2/2026 12:00 PM"), ("Not/AZone", "02/02/2026 12:00 PM")],
)
def test_board_rejects_bad_input(source: str, when: str) -> None:
    result = runner.invoke(app, ["--from", source, "--when", when, "Asia/Dubai"])
    assert result.exit_code == 2
