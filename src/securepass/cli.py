"""securepass entry point — generation options plus global output flags."""

from __future__ import annotations

import click
from click.core import ParameterSource
from pydantic import ValidationError

from securepass import __version__
from securepass.commands._base import PassCommand
from securepass.commands._context import AppContext
from securepass.config.settings import PassSettings


def _given(ctx: click.Context, name: str) -> bool:
    """True when *name* was set explicitly rather than left at its default."""
    source = ctx.get_parameter_source(name)
    return source not in (None, ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP)


@click.command(
    cls=PassCommand,
    examples="""\
  securepass
  securepass --length 32
  securepass -l 24 --no-symbols
  securepass --only-letters
  securepass --no-numbers --no-symbols -q
  securepass --json""",
)
@click.version_option(version=__version__, prog_name="securepass")
@click.option(
    "-l",
    "--length",
    type=click.IntRange(min=1),
    default=None,
    help="Password length  [default: 16, or [generator] length in securepass.toml]",
)
@click.option("--no-symbols", is_flag=True, help="Exclude symbols from the password.")
@click.option("--no-numbers", is_flag=True, help="Exclude digits from the password.")
@click.option(
    "--only-letters",
    is_flag=True,
    help="Use only upper- and lowercase letters (overrides --no-symbols/--no-numbers).",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print the password only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    length: int | None,
    no_symbols: bool,
    no_numbers: bool,
    only_letters: bool,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """securepass — generate a cryptographically secure random password."""
    generator: dict[str, object] = {"length": length}
    if _given(ctx, "no_symbols"):
        generator["include_symbols"] = not no_symbols
    if _given(ctx, "no_numbers"):
        generator["include_numbers"] = not no_numbers
    if _given(ctx, "only_letters"):
        generator["letters_only"] = only_letters

    try:
        settings = PassSettings.from_cli(
            config_path=config_path,
            generator=generator,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc

    app = AppContext(settings)

    from securepass.services.generate import GenerateService

    svc = GenerateService(min_length=settings.generator.min_length)
    app.emit(svc.generate(settings.generator.to_policy()))
