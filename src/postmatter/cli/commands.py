"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from postmatter.config import CONFIG_FILE, Settings, load_config
from postmatter.core.errors import DocumentError
from postmatter.core.parse import parse_file
from postmatter.core.pipeline import CheckResult, run_check


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_result(result: CheckResult) -> None:
    """Print the error or warnings for one checked post."""
    if result.error is not None:
        typer.echo(f"{result.error.path}:{result.error.line}: error [{result.error.code}] {result.error.message}")
    for w in result.warnings:
        typer.echo(str(w))


def check_cmd(
    path: Annotated[str, typer.Argument(help="Post file or directory to check")],
    strict: Annotated[Optional[bool], typer.Option("--strict/--no-strict", help="Fail on warnings too")] = None,
    required: Annotated[Optional[list[str]], typer.Option("--required", help="Required front-matter field (repeatable)")] = None,
    ):
    """Parse and validate posts, reporting errors and warnings with file and line."""
    settings = _settings(overrides={"strict": strict, "required_fields": required or None})
    if not Path(path).exists():
        _fail(f"No such file or directory: {path}")

    try:
        results = run_check(path, settings)
    except OSError as e:
        _fail("Check failed", e)

    for result in results:
        _echo_result(result)

    failed = [r for r in results if not r.ok]
    warned = sum(len(r.warnings) for r in results)
    typer.echo(
        f"Checked {len(results)} post(s) - "
        f"{len(results) - len(failed)} ok, "
        f"{len(failed)} failed, "
        f"{warned} warning(s)"
    )
    if failed:
        raise typer.Exit(1)


def show_cmd(
    path: Annotated[str, typer.Argument(help="Post file to parse")],
    ):
    """Print the parsed document as JSON."""
    settings = _settings()
    try:
        doc = parse_file(Path(path), settings)
    except DocumentError as e:
        _fail(str(e))
    typer.echo(doc.model_dump_json(indent=2))


def init_cmd(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config file")] = False,
    ):
    """Write a default postmatter.yaml to the current directory."""
    target = Path(CONFIG_FILE)
    if target.exists() and not force:
        _fail(f"{CONFIG_FILE} already exists (use --force to overwrite)")
    target.write_text(yaml.safe_dump(Settings().model_dump(), sort_keys=False), encoding='utf-8')
    typer.echo(f"Config written to: {target}")
