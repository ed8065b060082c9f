"""
Command-line interface for privacy-aware coin selection trials.
"""

from __future__ import annotations

import random
import sys
from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from coinselect.config import SelectionConfig, get_settings
from coinselect.generator import generate_coins, generate_payments
from coinselect.models import AnonsetColor, InvalidSelectionInput, Solution
from coinselect.scoring import ScorePreference
from coinselect.trials import run_trials

app = typer.Typer(
    name="coinselect",
    help="Privacy-aware coin selection trials",
    add_completion=False,
)


@app.callback()
def callback() -> None:
    """Privacy-aware coin selection trials."""


def setup_logging(level: str) -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def parse_caps(caps: list[str]) -> dict[AnonsetColor, int]:
    """
    Parse COLOR=N cap options.

    Raises:
        ValueError: If an entry is malformed or names an unknown color
    """
    result: dict[AnonsetColor, int] = {}
    for entry in caps:
        color_name, sep, value = entry.partition("=")
        if not sep:
            raise ValueError(f"Invalid cap '{entry}', expected COLOR=N")
        try:
            color = AnonsetColor(color_name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown color '{color_name}'") from None
        try:
            result[color] = int(value)
        except ValueError:
            raise ValueError(f"Invalid cap value '{value}' for {color.value}") from None
    return result


def format_solution(solution: Solution) -> str:
    used = ", ".join(f"{c.name} {c.value} A{c.anonymity_set:g}" for c in solution.coins)
    handled = ", ".join(str(p.value) for p in solution.handled_payments)
    lines = [
        f"Solution({solution.id}) total value: {solution.total_value} "
        f"total payments: {solution.total_payment_value} "
        f"leftover: {solution.leftover_value} score: {solution.score()} "
        f"compute time: {solution.time_elapsed}",
        f"Used coins: {used}",
        f"Handled payments: {handled}",
    ]
    return "\n".join(lines)


@app.command()
def run(
    coins: Annotated[
        int | None, typer.Option("--coins", "-c", help="Number of coins (random 1-49 if unset)")
    ] = None,
    payments: Annotated[
        int | None,
        typer.Option("--payments", "-p", help="Number of payments (random 0-9 if unset)"),
    ] = None,
    trials: Annotated[
        int | None, typer.Option("--trials", "-n", help="Number of selection runs")
    ] = None,
    anonymity_target: Annotated[
        int | None, typer.Option("--anon-target", "-a", help="Anonymity set target")
    ] = None,
    max_coins: Annotated[
        int | None, typer.Option("--max-coins", "-m", help="Maximum selected coins")
    ] = None,
    caps: Annotated[
        list[str] | None,
        typer.Option("--cap", help="Per-color cap as COLOR=N (red, orange, green)"),
    ] = None,
    origins: Annotated[
        int, typer.Option("--origins", help="Number of origin transactions for generated coins")
    ] = 0,
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Random seed")] = None,
    shift_chance: Annotated[
        int | None, typer.Option("--shift-chance", help="Adjacent swap chance in percent")
    ] = None,
    prefer: Annotated[
        ScorePreference | None, typer.Option("--prefer", help="Best score direction")
    ] = None,
    legacy_probabilities: Annotated[
        bool,
        typer.Option(
            "--legacy-probabilities",
            help="Reproduce the integer-truncated probabilities of the reference selector",
        ),
    ] = False,
    log_level: Annotated[
        str | None, typer.Option("--log-level", "-l", help="Log level")
    ] = None,
) -> None:
    """Generate random coins and payments and run selection trials."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    try:
        config = SelectionConfig(
            anonymity_target=(
                settings.anonymity_target if anonymity_target is None else anonymity_target
            ),
            max_coins=settings.max_coins if max_coins is None else max_coins,
            max_per_color=parse_caps(caps or []),
            shift_chance_percent=(
                settings.shift_chance_percent if shift_chance is None else shift_chance
            ),
            legacy_probabilities=legacy_probabilities or settings.legacy_probabilities,
        )
    except (ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    rng = random.Random(seed)
    coin_count = rng.randint(1, 49) if coins is None else coins
    payment_count = rng.randint(0, 9) if payments is None else payments

    generated_coins = generate_coins(coin_count, rng, origin_count=origins)
    generated_payments = generate_payments(payment_count, rng)

    try:
        report = run_trials(
            generated_coins,
            generated_payments,
            config,
            trials=settings.trials if trials is None else trials,
            seed=rng.getrandbits(64),
            prefer=prefer or ScorePreference(settings.prefer),
        )
    except InvalidSelectionInput as e:
        logger.error(str(e))
        raise typer.Exit(1)

    for i, solution in enumerate(report.unique):
        typer.echo(f"Solution #{i}")
        typer.echo(format_solution(solution))

    typer.echo(f"{len(report.unique)} unique solution(s) from {report.trial_count} trial(s)")
    typer.echo("Best solution(s):")
    for solution in report.best:
        typer.echo(format_solution(solution))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
