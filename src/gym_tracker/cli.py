"""CLI entry point for gym-tracker."""

import logging

import click

from .commands import add, analyze, exercises, history, init, log, progress, serve, stats
from .config import get_settings


@click.group()
@click.version_option(version="0.1.0", prog_name="gym-tracker")
@click.option("-v", "--verbose", is_flag=True, help="Show diagnostic log messages")
def main(verbose: bool):
    """gym-tracker: personal workout log with progress charts and an AI coach.

    Record exercises, sets, reps and weights per session, review your
    history and per-exercise progress, and ask Gemini for a short analysis
    of recent trends.

    Example usage:

        # Initialize the data directory
        gym-tracker init

        # Log a workout
        gym-tracker log
        gym-tracker add --day Pecho -e "Press de Banca Plano:8x60,8x65"

        # Review progress
        gym-tracker exercises
        gym-tracker progress "Press de Banca Plano"
        gym-tracker analyze
    """
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(log)
main.add_command(add)
main.add_command(history)
main.add_command(exercises)
main.add_command(progress)
main.add_command(stats)
main.add_command(analyze)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
