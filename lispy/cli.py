"""Typer CLI entrypoints."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from lispy.interpreter import Evaluator
from lispy.logging_utils import configure_logging
from lispy.printer import to_lisp_str
from lispy.repl import EVAL_ERRORS, Repl, format_error
from lispy.repl_server import ReplServer

app = typer.Typer(name="lispy", help="A minimal Lisp interpreter", add_completion=False)


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        repl()


@app.command()
def repl(
    history_file: Annotated[Path | None, typer.Option("--history-file", envvar="LISPY_HISTORY_FILE")] = None,
) -> None:
    """Start the interactive read-eval-print loop."""
    configure_logging()
    Repl().run(history_file=history_file)


@app.command()
def run(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True)],
) -> None:
    """Evaluate every form in a file and print the value of the last one."""
    configure_logging()
    logger.info("run.start path={}", path)
    try:
        result = Evaluator().load_file(path)
    except EVAL_ERRORS as ex:
        typer.echo(format_error(ex), err=True)
        raise typer.Exit(code=1)
    typer.echo(to_lisp_str(result))


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", envvar="LISPY_HOST")] = None,
    port: Annotated[int | None, typer.Option("--port", envvar="LISPY_PORT")] = None,
) -> None:
    """Serve a JSON-lines REPL over TCP."""
    configure_logging()
    ReplServer(host, port).serve_forever()


def main() -> None:
    app()
