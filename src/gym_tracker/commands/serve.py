"""Web API server command."""

import click

from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the JSON API server.

    Serves the workout history, progress series and AI coach over HTTP so a
    browser front end can use them. Interactive docs are at /docs.

    Examples:

        gym-tracker serve
        gym-tracker serve --port 3000 --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    click.echo()
    click.echo(click.style("Starting gym-tracker API...", fg="green"))
    click.echo(f"  API:  http://{host}:{port}")
    click.echo(f"  Docs: http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")

    uvicorn.run(
        "gym_tracker.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
