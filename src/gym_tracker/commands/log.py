"""Workout logging commands."""

import math
from datetime import datetime

import click
import questionary
from questionary import Style

from ..db import StorageError
from ..models.draft import WorkoutDraft
from ..models.exercises import suggested_exercises
from ..models.workout import DayType, Session, check_weight, to_utc
from ..utils.formatting import format_long_date, format_weight
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    open_store,
)

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

OTHER_EXERCISE = "__other__"
FINISH = "__finish__"


def parse_set(value: str) -> tuple[int, float]:
    """Parse ``REPSxWEIGHT`` such as ``5x100`` or ``8x22.5``."""
    reps_str, sep, weight_str = value.strip().lower().partition("x")
    if not sep:
        raise ValueError(f"Invalid set {value!r}, expected REPSxWEIGHT (e.g. 5x100)")
    reps = int(reps_str)
    weight = float(weight_str.replace(",", "."))
    if reps < 0 or not math.isfinite(weight) or weight < 0:
        raise ValueError(f"Invalid set {value!r}, values must be finite and non-negative")
    return reps, weight


def parse_exercise_option(value: str) -> tuple[str, list[tuple[int, float]]]:
    """Parse ``NAME:SET,SET,...`` such as ``Remo con Barra:10x60,8x65``."""
    name, sep, sets_str = value.rpartition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Invalid exercise {value!r}, expected NAME:REPSxWEIGHT,...")
    sets = [parse_set(s) for s in sets_str.split(",") if s.strip()]
    if not sets:
        raise ValueError(f"Exercise {name!r} has no sets")
    return name, sets


def add_to_draft(draft: WorkoutDraft, name: str, sets: list[tuple[int, float]]) -> None:
    """Add an exercise and its sets the same way the editor does."""
    exercise = draft.add_exercise(name)
    for i, (reps, weight) in enumerate(sets):
        entry = exercise.sets[0] if i == 0 else draft.add_set(exercise.id)
        draft.update_set(exercise.id, entry.id, reps=reps, weight=weight)


def print_session(session: Session) -> None:
    """Print a session with all of its sets."""
    click.echo(click.style(f"{format_long_date(session.date)} - {session.day_type.value}", bold=True))
    for exercise in session.exercises:
        sets = ", ".join(f"{s.reps}x{format_weight(s.weight)}" for s in exercise.sets)
        click.echo(f"  {exercise.name}: {sets or 'no sets'}")
    if session.notes:
        click.echo(f"  Notes: {session.notes}")


async def save_draft(ctx: click.Context, draft: WorkoutDraft, date: datetime | None) -> None:
    store = await open_store()
    session = draft.finalize(now=date)
    if session is None:
        echo_info("No exercises logged, nothing saved.")
        return

    try:
        await store.append(session)
    except StorageError as e:
        echo_error(f"Could not save workout: {e}")
        ctx.exit(1)

    echo_success(f"Workout saved ({len(session.exercises)} exercises, {session.total_sets} sets)")
    print_session(session)


@click.command("add")
@click.option(
    "--day",
    "day_type",
    type=click.Choice([d.value for d in DayType]),
    required=True,
    help="Workout day type",
)
@click.option(
    "-e",
    "--exercise",
    "exercises",
    multiple=True,
    help='Exercise and sets, e.g. "Remo con Barra:10x60,8x65" (repeatable)',
)
@click.option("--notes", default=None, help="Free-text notes")
@click.option(
    "--date",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]),
    default=None,
    help="Session time in UTC (default: now)",
)
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    day_type: str,
    exercises: tuple[str, ...],
    notes: str | None,
    date: datetime | None,
):
    """Log a workout non-interactively."""
    ensure_initialized(ctx)

    draft = WorkoutDraft(day_type=DayType(day_type), notes=notes)
    for value in exercises:
        try:
            name, sets = parse_exercise_option(value)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--exercise") from e
        add_to_draft(draft, name, sets)

    await save_draft(ctx, draft, to_utc(date) if date else None)


async def _ask_set(default_reps: int, default_weight: float) -> tuple[int, float] | None:
    reps = await questionary.text(
        "Reps:",
        default=str(default_reps),
        validate=lambda v: v.isdigit() or "Enter a whole number",
        style=custom_style,
    ).ask_async()
    if reps is None:
        return None

    weight = await questionary.text(
        "Weight (kg):",
        default=f"{default_weight:g}",
        validate=_is_weight,
        style=custom_style,
    ).ask_async()
    if weight is None:
        return None

    return int(reps), float(weight.replace(",", "."))


def _is_weight(value: str) -> bool | str:
    try:
        weight = float(value.replace(",", "."))
    except ValueError:
        return "Enter a number"
    try:
        check_weight(weight)
    except ValueError:
        return "Weight must be a non-negative number"
    return True


async def collect_draft() -> WorkoutDraft | None:
    """Run the interactive questionnaire; None if the user cancels."""
    click.echo("\n=== New Workout ===\n")

    day_type = await questionary.select(
        "Which day is it?",
        choices=[questionary.Choice(d.value, d) for d in DayType],
        style=custom_style,
    ).ask_async()
    if day_type is None:
        return None

    draft = WorkoutDraft(day_type=day_type)
    while True:
        choices = [questionary.Choice(name, name) for name in suggested_exercises(day_type)]
        choices.append(questionary.Choice("Other exercise...", OTHER_EXERCISE))
        choices.append(questionary.Choice("Finish workout", FINISH))

        choice = await questionary.select(
            f"Add an exercise ({len(draft.exercises)} so far):",
            choices=choices,
            style=custom_style,
        ).ask_async()
        if choice is None:
            return None
        if choice == FINISH:
            break
        if choice == OTHER_EXERCISE:
            choice = await questionary.text("Exercise name:", style=custom_style).ask_async()
            if not choice or not choice.strip():
                continue
            choice = choice.strip()

        exercise = draft.add_exercise(choice)
        entry = exercise.sets[0]
        while True:
            click.echo(f"  {exercise.name} - set {len(exercise.sets)}")
            answer = await _ask_set(entry.reps, entry.weight)
            if answer is None:
                return None
            draft.update_set(exercise.id, entry.id, reps=answer[0], weight=answer[1])

            another = await questionary.confirm(
                "Another set?", default=True, style=custom_style
            ).ask_async()
            if not another:
                break
            entry = draft.add_set(exercise.id)

    notes = await questionary.text("Notes (optional):", style=custom_style).ask_async()
    draft.notes = notes or None
    return draft


@click.command("log")
@click.pass_context
@async_command
async def log(ctx: click.Context):
    """Log a workout interactively.

    Pick the day type, then add exercises from the suggested list (or type
    your own) and enter each set's reps and weight.
    """
    ensure_initialized(ctx)

    draft = await collect_draft()
    if draft is None:
        echo_info("Cancelled, nothing saved.")
        return

    if not draft.is_empty:
        confirmed = await questionary.confirm(
            f"Save workout with {len(draft.exercises)} exercise(s)?",
            default=True,
            style=custom_style,
        ).ask_async()
        if not confirmed:
            echo_info("Discarded.")
            return

    await save_draft(ctx, draft, None)
