"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the gym-tracker data directory and database."""
    data_dir = get_settings().data_dir

    echo_info(f"Initializing gym-tracker in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("gym-tracker is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Log a workout:")
    click.echo("     gym-tracker log                  # Interactive")
    click.echo('     gym-tracker add --day Pierna -e "Sentadilla (Squat):5x100,5x110"')
    click.echo()
    click.echo("  2. Review your progress:")
    click.echo('     gym-tracker progress "Sentadilla (Squat)"')
    click.echo("     gym-tracker analyze")
