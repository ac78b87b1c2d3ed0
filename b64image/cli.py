"""
Command line entry point for Insert Base64 Image. Accessed by 'b64image' in the command line.
"""
from functools import update_wrapper
from pathlib import Path

import click

from b64image.config.settings import (
    Settings,
    configure_logging,
    default_settings_dir,
    load_settings,
    save_settings,
)
from b64image.models.image_model import SUPPORTED_EXTENSIONS, CodeContext
from b64image.services.pipeline_service import InsertPipeline

SETTING_KEYS = {
    "strip-linebreaks": "strip_linebreaks",
    "wrap-by-context": "wrap_by_context",
}


def large_file_prompt(size_text: str) -> str:
    """Confirmation text for images above the 10 KB threshold."""
    return f"The selected image is quite large ({size_text})\nAre you really sure you want to insert it?"


def pass_settings(f):
    """
    Decorator to pass the settings directory and loaded Settings to Click commands.
    """
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        ctx.ensure_object(dict)
        settings_dir = ctx.obj.get("settings_dir") or default_settings_dir()
        return f(settings_dir, load_settings(settings_dir), *args, **kwargs)
    return update_wrapper(new_func, f)


@click.group()
@click.option("--settings-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding settings.json.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Detailed logging for debugging purposes.")
@click.version_option(package_name="insert-base64-image")
@click.pass_context
def main(ctx, settings_dir, verbose):
    """Insert Base64 Image: embed an image file as a data URI snippet."""
    ctx.ensure_object(dict)
    configure_logging(verbose)
    ctx.obj["settings_dir"] = settings_dir
    ctx.obj["verbose"] = verbose


@main.command()
@pass_settings
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--context", "-c", "context_name", type=click.Choice([c.value for c in CodeContext]),
              default=None, help="Code context of the target document.")
@click.option("--for-file", type=click.Path(path_type=Path), default=None,
              help="Guess the code context from this document's extension.")
@click.option("--strip/--no-strip", default=None,
              help="Remove line breaks from the Base64 data (default: saved setting).")
@click.option("--wrap/--no-wrap", default=None,
              help="Wrap the result based on the code context (default: saved setting).")
@click.option("-y", "--yes", is_flag=True, default=False,
              help="Do not ask before embedding large images.")
def encode(settings_dir: Path, settings: Settings, image: Path, context_name: str | None,
           for_file: Path | None, strip: bool | None, wrap: bool | None, yes: bool):
    """
    Print IMAGE as a snippet for the chosen code context.

    Example: b64image encode logo.png --context markup
    """
    if image.suffix.lower().lstrip(".") not in SUPPORTED_EXTENSIONS:
        raise click.BadParameter(
            f"supported extensions: {', '.join(SUPPORTED_EXTENSIONS)}", param_hint="IMAGE"
        )
    if context_name is not None:
        context = CodeContext(context_name)
    elif for_file is not None:
        context = CodeContext.from_extension(for_file.suffix)
    else:
        context = CodeContext.PLAIN

    if strip is not None:
        settings.strip_linebreaks = strip
    if wrap is not None:
        settings.wrap_by_context = wrap

    def confirm(message: str) -> bool:
        if yes:
            return True
        return click.confirm(message, default=False, err=True)

    pipeline = InsertPipeline(settings=settings, confirm_message=large_file_prompt)
    result = pipeline.run(pick_file=lambda: image, confirm=confirm, context=context)
    if result is not None:
        click.echo(result.snippet, nl=False)


@main.group()
def config():
    """Show or change the saved settings."""


@config.command("show")
@pass_settings
def config_show(settings_dir: Path, settings: Settings):
    """Print the saved settings."""
    click.echo(f"# {settings_dir}")
    for key, attr in SETTING_KEYS.items():
        click.echo(f"{key}: {'on' if getattr(settings, attr) else 'off'}")


@config.command("set")
@pass_settings
@click.argument("key", type=click.Choice(list(SETTING_KEYS)))
@click.argument("value", type=click.Choice(["on", "off"]))
def config_set(settings_dir: Path, settings: Settings, key: str, value: str):
    """Persist one setting, e.g. 'b64image config set wrap-by-context off'."""
    setattr(settings, SETTING_KEYS[key], value == "on")
    path = save_settings(settings_dir, settings)
    click.echo(f"Saved {key}={value} to {path}")


@main.command()
@click.pass_context
def gui(ctx: click.Context):
    """Launch the desktop application."""
    # pylint: disable=import-outside-toplevel
    from b64image.main import main as run_gui
    run_gui(settings_dir=ctx.obj.get("settings_dir"), verbose=ctx.obj.get("verbose", False))
