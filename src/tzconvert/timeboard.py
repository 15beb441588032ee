"""CLI entry point for a one-off conversion board.

Targets are IANA zones or catalogue labels ("Dubai, United Arab Emirates"):
    uv run python src/tzconvert/timeboard.py --from America/New_York --when "02/02/2026 12:00 PM" Asia/Dubai "Tokyo, Japan"
"""

from typing import Annotated

import typer
from dotenv import load_dotenv

load_dotenv()

from tzconvert import zones  # noqa: E402
from tzconvert.cities import find_city  # noqa: E402
from tzconvert.convert import (  # noqa: E402
    convert_datetime,
    format_source_datetime,
    is_valid_datetime,
)
from tzconvert.i18n import day_diff_label  # noqa: E402
from tzconvert.settings import configure_logging  # noqa: E402

app = typer.Typer(
    help="Print the local time at each target for one source date/time.",
    add_completion=False,
)


def _resolve_zone(name: str) -> str:
    city = find_city(name)
    return city.timezone if city is not None else name


@app.command()
def board(
    targets: Annotated[
        list[str], typer.Argument(help="Target IANA zones or city labels")
    ],
    source: Annotated[
        str, typer.Option("--from", help="Source IANA zone or city label")
    ],
    when: Annotated[
        str, typer.Option("--when", help='Source date/time, "MM/DD/YYYY H:MM AP"')
    ],
) -> None:
    """Convert WHEN in the source zone to every target and print one line each."""
    configure_logging()
    source_tz = _resolve_zone(source)

    if not is_valid_datetime(when):
        typer.echo(f"Invalid date/time {when!r}; expected MM/DD/YYYY H:MM AP", err=True)
        raise typer.Exit(code=2)
    if not zones.is_known_timezone(source_tz):
        typer.echo(f"Unknown source timezone {source!r}", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"{source}: {format_source_datetime(when)}")
    for target in targets:
        result = convert_datetime(when, source_tz, _resolve_zone(target))
        if result is None:
            typer.echo(f"{target}: --")
            continue
        line = f"{target}: {result.converted}"
        diff = day_diff_label(result.day_diff, "en")
        if diff:
            line += f" ({diff})"
        typer.echo(line)


if __name__ == "__main__":
    app()
