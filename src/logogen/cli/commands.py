"""
Click command definitions for the logogen CLI.

This module contains the Click command group and the generate and refine
commands. The CLI plays the collaborator role: it validates user text,
writes returned images to disk, and turns errors into messages.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from logogen import (
    Config,
    ImagePayload,
    LogoClient,
    __version__,
    validate_description,
    validate_feedback,
)
from logogen.cli import output
from logogen.cli.handlers import run_with_error_handling
from logogen.cli.utils import default_output_path
from logogen.logging_config import configure_logging, get_verbosity_from_env


_COMMON_OPTIONS = [
    click.option("--out", "-o", type=click.Path(path_type=Path), help="Output file path."),
    click.option("--model", "-m", help="Gemini image model ID (default from config)."),
    click.option(
        "--api-key",
        help="Gemini API key (overrides GEMINI_API_KEY environment variable).",
    ),
    click.option(
        "--quiet",
        "-q",
        is_flag=True,
        help="Minimize messages; only print result path or errors.",
    ),
    click.option(
        "--verbose",
        "-v",
        "verbose_count",
        count=True,
        help="Increase verbosity: -v also show prompts, -vv show API detail.",
    ),
    click.option(
        "--debug-api",
        is_flag=True,
        help="Log raw API request payload and response (image data truncated) for debugging.",
    ),
]


def _common_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Apply the options shared by generate and refine."""
    for option in reversed(_COMMON_OPTIONS):
        fn = option(fn)
    return fn


def _setup_logging(quiet: bool, verbose_count: int) -> None:
    # CLI flags override LOGOGEN_VERBOSITY
    verbose_level = min(verbose_count, 2) if verbose_count > 0 else get_verbosity_from_env()
    configure_logging(verbose_level=verbose_level, quiet=quiet)


def _load_config(api_key: str | None, model: str | None, debug_api: bool) -> Config:
    """Load config from env, apply CLI overrides, and validate (fatal on failure)."""
    config = Config.from_env()
    if api_key is not None:
        config.set_api_key(api_key)
    if model:
        config.set_model(model)
    if debug_api:
        config.debug_api = True
    config.validate()
    return config


def _save_and_report(
    image: ImagePayload,
    out: Path | None,
    *,
    prefix: str,
    action: str,
    model: str,
    user_text: str,
    quiet: bool,
) -> None:
    out_path = out if out is not None else Path(default_output_path(image.extension, prefix))
    out_path.write_bytes(image.decode())
    if not quiet:
        output.print_success_result(
            output_path=out_path,
            model_used=model,
            mime_type=image.mime_type,
            action=action,
            user_text=user_text,
        )
    # Path on stdout for scriptability
    click.echo(str(out_path))


@click.group(help="AI logo generation and refinement with Gemini image models.")
@click.version_option(version=__version__, package_name="logogen")
@click.pass_context
def cli(ctx: click.Context) -> None:
    ctx.color = True


@cli.command()
@click.option(
    "--description",
    "-d",
    required=True,
    help="Description of the business, e.g. \"coffee shop for developers called CodeAndBrew\".",
)
@_common_options
def generate(
    description: str,
    out: Path | None,
    model: str | None,
    api_key: str | None,
    quiet: bool,
    verbose_count: int,
    debug_api: bool,
) -> None:
    """Generate a logo from a business description."""
    _setup_logging(quiet, verbose_count)

    def do_generate() -> None:
        config = _load_config(api_key, model, debug_api)
        validate_description(description)
        with LogoClient.from_config(config) as client:
            image = client.generate(description)
        _save_and_report(
            image,
            out,
            prefix="logo",
            action="generate",
            model=config.model,
            user_text=description,
            quiet=quiet,
        )

    run_with_error_handling(do_generate, action="generate", quiet=quiet)


@cli.command()
@click.option(
    "--image",
    "-i",
    "image_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the logo to refine (e.g. the output of generate).",
)
@click.option(
    "--feedback",
    "-f",
    required=True,
    help="What to change, e.g. \"use more blue\".",
)
@_common_options
def refine(
    image_path: Path,
    feedback: str,
    out: Path | None,
    model: str | None,
    api_key: str | None,
    quiet: bool,
    verbose_count: int,
    debug_api: bool,
) -> None:
    """Refine an existing logo with free-text feedback."""
    _setup_logging(quiet, verbose_count)

    def do_refine() -> None:
        config = _load_config(api_key, model, debug_api)
        validate_feedback(feedback)
        prior = ImagePayload.from_file(image_path)
        with LogoClient.from_config(config) as client:
            image = client.refine(prior, feedback)
        _save_and_report(
            image,
            out,
            prefix="logo_refined",
            action="refine",
            model=config.model,
            user_text=feedback,
            quiet=quiet,
        )

    run_with_error_handling(do_refine, action="refine", quiet=quiet)


def main() -> None:
    """Entry point for the logogen console script."""
    cli()
