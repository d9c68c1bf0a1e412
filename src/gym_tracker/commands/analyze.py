"""AI coach command."""

import click

from ..services.analysis import AnalysisStatus
from .base import (
    async_command,
    build_analyzer,
    echo_error,
    echo_info,
    echo_warning,
    ensure_initialized,
    open_store,
)


@click.command()
@click.pass_context
@async_command
async def analyze(ctx: click.Context):
    """Ask the AI coach to review your recent workouts.

    Sends your last sessions to Gemini and prints a short Markdown analysis
    (in Spanish). Requires GEMINI_API_KEY to be set.
    """
    ensure_initialized(ctx)

    store = await open_store()
    if not len(store):
        echo_info("No workouts logged yet. Log a few sessions first.")
        return

    analyzer = build_analyzer()
    echo_info(f"Analyzing your last {min(len(store), analyzer.history_limit)} workouts...")

    result = await analyzer.analyze(store.all())

    if result.status == AnalysisStatus.NO_CREDENTIALS:
        echo_warning(result.text)
        return
    if result.status != AnalysisStatus.OK:
        echo_error(result.text)
        ctx.exit(1)

    click.echo()
    click.echo(result.text)
