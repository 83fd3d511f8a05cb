"""Command-line walkthroughs of the Option, Result, Writer and Deferred APIs."""

from __future__ import annotations

from types import ModuleType

import typer

from monadkit._config import init
from monadkit._logging import get_logger
from monadkit.errors import ConfigError
from monadkit.scenarios import SCENARIOS

app = typer.Typer(help='monadkit - Option, Result and Writer walkthroughs')

logger = get_logger(__name__)


def _run_scenario(name: str, scenario: ModuleType) -> None:
    logger.debug('scenario_started', scenario=name)
    typer.secho(f'== {scenario.TITLE} ==', fg=typer.colors.BLUE, bold=True)
    for line in scenario.run():
        typer.echo(line)
    typer.echo()


def _run_all() -> None:
    for name, scenario in SCENARIOS.items():
        _run_scenario(name, scenario)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None, '--log-level', help='Log level (DEBUG, INFO, ...). Silent when unset.'
    ),
    json_logs: bool | None = typer.Option(
        None, '--json-logs/--console-logs', help='Render logs as JSON instead of console lines'
    ),
) -> None:
    """Run a monad walkthrough. Without a command, an interactive menu is shown."""
    try:
        init(log_level=log_level, json_logs=json_logs)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint='--log-level') from e

    if ctx.invoked_subcommand is None:
        menu()


@app.command()
def menu() -> None:
    """Pick a scenario from a numbered menu."""
    names = list(SCENARIOS)
    for number, name in enumerate(names, start=1):
        typer.echo(f'{number}. {SCENARIOS[name].TITLE}')
    typer.echo(f'{len(names) + 1}. Run all scenarios')

    choice = typer.prompt('Which scenario would you like to run?', type=typer.IntRange(1, len(names) + 1))
    typer.echo()
    if choice == len(names) + 1:
        _run_all()
    else:
        name = names[choice - 1]
        _run_scenario(name, SCENARIOS[name])
    typer.secho('Done!', fg=typer.colors.GREEN)


@app.command()
def option() -> None:
    """Option: safe null handling."""
    _run_scenario('option', SCENARIOS['option'])


@app.command()
def result() -> None:
    """Result: error handling without exceptions."""
    _run_scenario('result', SCENARIOS['result'])


@app.command()
def writer() -> None:
    """Writer: computation with logging."""
    _run_scenario('writer', SCENARIOS['writer'])


@app.command()
def validation() -> None:
    """Validation: accumulate every error."""
    _run_scenario('validation', SCENARIOS['validation'])


@app.command()
def deferred() -> None:
    """Deferred: async pipelines."""
    _run_scenario('deferred', SCENARIOS['deferred'])


@app.command(name='all')
def run_all() -> None:
    """Run every scenario in order."""
    _run_all()


if __name__ == '__main__':
    app()
