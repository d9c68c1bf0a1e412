"""Progress and statistics commands."""

import click

from ..services.metrics import derive_progress, extract_exercise_catalog, summarize_sessions
from ..utils.formatting import format_weight
from .base import (
    async_command,
    echo_info,
    echo_warning,
    ensure_initialized,
    format_table,
    open_store,
)


@click.command()
@click.argument("exercise")
@click.pass_context
@async_command
async def progress(ctx: click.Context, exercise: str):
    """Show max weight and volume per session for EXERCISE.

    The name must match exactly as it was logged; see 'gym-tracker exercises'.
    """
    ensure_initialized(ctx)

    store = await open_store()
    series = derive_progress(store.all(), exercise)

    if series.skipped:
        echo_warning(f"{len(series.skipped)} session(s) logged {exercise!r} without sets and were skipped.")

    if not series.points:
        echo_info(f"No data for {exercise!r}.")
        return

    rows = [
        [p.date, p.raw_date.strftime("%Y-%m-%d"), format_weight(p.max_weight), f"{p.volume:g}"]
        for p in series
    ]

    click.echo()
    click.echo(click.style(f"Progress: {exercise}", bold=True))
    click.echo("=" * 50)
    click.echo(format_table(headers=["Date", "Day", "Max Weight", "Volume"], rows=rows))
    click.echo()
    click.echo(f"Personal record: {format_weight(series.personal_record)}")
    click.echo(f"Best volume: {series.best_volume:g}")


@click.command()
@click.pass_context
@async_command
async def exercises(ctx: click.Context):
    """List every exercise name found in the history."""
    ensure_initialized(ctx)

    store = await open_store()
    names = extract_exercise_catalog(store.all())

    if not names:
        echo_info("No exercises logged yet.")
        return

    for name in names:
        click.echo(name)


@click.command()
@click.pass_context
@async_command
async def stats(ctx: click.Context):
    """Show overall workout counters."""
    ensure_initialized(ctx)

    store = await open_store()
    summary = summarize_sessions(store.all())

    click.echo()
    click.echo(click.style("Statistics", bold=True))
    click.echo("=" * 50)
    click.echo(f"Total workouts: {summary.total_sessions}")
    click.echo(f"Active days: {summary.active_days}")
    click.echo(f"Total sets: {summary.total_sets}")
    click.echo(f"Total volume: {summary.total_volume:g} kg")
