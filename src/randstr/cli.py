"""Typer-based command line interface for the random string generator.

The ``generate`` command loads configuration, applies command line overrides,
builds a generator and prints one string per line.  ``predicates`` lists the
filter names accepted by ``--filter`` and by the ``filters`` config key.

Exit codes
----------
0 success
2 invalid argument (bad range, unknown filter, negative length)
3 I/O error (config file cannot be read)
4 configuration error
"""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, builder_from_config, load_config
from .generator import RandomStringGeneratorBuilder
from .predicates import CharacterPredicates
from .utils.errors import InvalidArgumentError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="randstr",
    help="Random Unicode strings. Use 'randstr generate' to produce strings.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    minimum: int | None,
    maximum: int | None,
    filters: list[str] | None,
    seed: int | None,
) -> RandomStringGeneratorBuilder:
    """Return a builder for ``cfg`` with command line overrides applied."""

    builder = builder_from_config(cfg)
    if minimum is not None or maximum is not None:
        builder.within_range(
            cfg.code_points.minimum if minimum is None else minimum,
            cfg.code_points.maximum if maximum is None else maximum,
        )
    if filters:
        builder.filtered_by(*(CharacterPredicates.from_name(name) for name in filters))
    if seed is not None:
        builder.using_random(random.Random(seed))
    return builder


@app.callback()
def main() -> None:
    """Entry point for the randstr command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    length: Optional[int] = typer.Option(  # noqa: B008
        None, "--length", "-n", help="Code points per string (default from config)"
    ),
    minimum: Optional[int] = typer.Option(  # noqa: B008
        None, "--min", help="Smallest code point to draw (inclusive)"
    ),
    maximum: Optional[int] = typer.Option(  # noqa: B008
        None, "--max", help="Largest code point to draw (inclusive)"
    ),
    filters: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--filter", "-f", help="Accept code points matching this predicate (repeatable)"
    ),
    copies: int = typer.Option(1, "--copies", "-c", min=1, help="How many strings to print"),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed a private random source for reproducible output"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Generate random strings."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except OSError as exc:
        _safe_exit(3, str(exc))
    except (ValidationError, yaml.YAMLError, InvalidArgumentError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    try:
        builder = _apply_overrides(
            cfg, minimum=minimum, maximum=maximum, filters=filters, seed=seed
        )
        generator = builder.build()
        size = cfg.length if length is None else length
        for _ in range(copies):
            typer.echo(generator.generate(size))
    except InvalidArgumentError as exc:
        _safe_exit(2, str(exc))

    logger.debug("Printed %d string(s)", copies)


@app.command("predicates")
def list_predicates() -> None:
    """List the predicate names accepted by ``--filter``."""

    for member in CharacterPredicates:
        typer.echo(member.value)


if __name__ == "__main__":  # pragma: no cover
    app()
