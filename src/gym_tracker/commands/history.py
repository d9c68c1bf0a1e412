"""Workout history command."""

import click

from ..utils.formatting import format_long_date
from .base import async_command, echo_info, ensure_initialized, open_store
from .log import print_session

PREVIEW_EXERCISES = 4


@click.command()
@click.option("-n", "--limit", default=10, type=int, help="Number of sessions to show")
@click.option("--full", is_flag=True, help="Show every set of each session")
@click.pass_context
@async_command
async def history(ctx: click.Context, limit: int, full: bool):
    """Show logged workouts, most recent first."""
    ensure_initialized(ctx)

    store = await open_store()
    sessions = store.all()

    if not sessions:
        echo_info("No workouts logged yet. Run 'gym-tracker log' to add one.")
        return

    for session in sessions[:limit]:
        click.echo()
        if full:
            print_session(session)
            continue

        click.echo(click.style(format_long_date(session.date), bold=True) + f"  [{session.day_type.value}]")
        for exercise in session.exercises[:PREVIEW_EXERCISES]:
            click.echo(f"  - {exercise.name} ({len(exercise.sets)} sets)")
        hidden = len(session.exercises) - PREVIEW_EXERCISES
        if hidden > 0:
            click.echo(f"  + {hidden} more")

    if len(sessions) > limit:
        click.echo()
        echo_info(f"Showing {limit} of {len(sessions)} workouts.")
