"""listfile CLI entry point."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import click

from listfile import __version__
from listfile.errors import ConversionError
from listfile.store.serialization import SerializationSettings, default_serialize
from listfile.store.typed import TypedListFile

logger = logging.getLogger(__name__)

ITEM_TYPES: dict[str, type] = {"str": str, "int": int, "float": float, "bool": bool}


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(), default=None, help="Config file path")
@click.option("--log-level", default=None, help="Log level")
@click.option("--json-logs", is_flag=True, help="JSON log output")
@click.pass_context
def main(
    ctx: click.Context,
    config: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """listfile - lists persisted line-by-line to text files."""
    from listfile.config.loader import load_config
    from listfile.logging_config import setup_logging

    try:
        cfg = load_config(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        level=log_level or cfg.global_.log_level,
        json_output=json_logs or cfg.global_.json_logs,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


def store_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that opens a list file."""

    func = click.option("--no-auto-flush", is_flag=True, help="Write once on exit instead of per change")(func)
    func = click.option("--type", "-t", "item_type", type=click.Choice(sorted(ITEM_TYPES)), default=None,
                        help="Element type")(func)
    func = click.option("--file", "-f", "file_path", type=click.Path(dir_okay=False), default=None,
                        help="Backing file (defaults to store.path from config)")(func)
    return func


@contextlib.contextmanager
def open_list(
    ctx: click.Context,
    file_path: str | None,
    item_type: str | None,
    no_auto_flush: bool,
) -> Iterator[TypedListFile[Any]]:
    """Open the list named on the command line and report failures as CLI errors."""
    cfg = ctx.obj["config"]
    path = file_path or cfg.store.path
    if not path:
        raise click.UsageError("No file given. Pass --file or set store.path in config.")

    type_name = item_type or cfg.typed.item_type
    settings = SerializationSettings.for_type(ITEM_TYPES[type_name])
    auto_flush = cfg.store.auto_flush and not no_auto_flush

    logger.debug("Opening %s (type=%s, auto_flush=%s)", path, type_name, auto_flush)
    try:
        with TypedListFile(
            Path(path).expanduser(),
            settings=settings,
            auto_flush=auto_flush,
            encoding=cfg.store.encoding,
        ) as items:
            yield items
    except (IndexError, ConversionError, UnicodeError, LookupError) as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"{path}: {e.strerror or e}") from e


def _parse(items: TypedListFile[Any], text: str) -> Any:
    return items.settings.from_line(text)


@main.command()
@store_options
@click.option("--numbered", "-n", is_flag=True, help="Prefix each line with its index")
@click.pass_context
def show(ctx: click.Context, file_path: str | None, item_type: str | None,
         no_auto_flush: bool, numbered: bool) -> None:
    """Print every element."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        for i, value in enumerate(items):
            text = default_serialize(value)
            click.echo(f"{i}: {text}" if numbered else text)


@main.command()
@store_options
@click.pass_context
def count(ctx: click.Context, file_path: str | None, item_type: str | None, no_auto_flush: bool) -> None:
    """Print the number of elements."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        click.echo(len(items))


@main.command()
@store_options
@click.argument("values", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, file_path: str | None, item_type: str | None,
        no_auto_flush: bool, values: tuple[str, ...]) -> None:
    """Append one or more values."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        for text in values:
            items.add(_parse(items, text))


@main.command()
@store_options
@click.argument("index", type=int)
@click.argument("value")
@click.pass_context
def insert(ctx: click.Context, file_path: str | None, item_type: str | None,
           no_auto_flush: bool, index: int, value: str) -> None:
    """Insert VALUE before position INDEX."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        items.insert(index, _parse(items, value))


@main.command()
@store_options
@click.argument("value")
@click.pass_context
def remove(ctx: click.Context, file_path: str | None, item_type: str | None,
           no_auto_flush: bool, value: str) -> None:
    """Remove the first element equal to VALUE."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        if items.remove(_parse(items, value)):
            click.echo("removed")
        else:
            click.echo("not found")
            ctx.exit(1)


@main.command("remove-at")
@store_options
@click.argument("index", type=int)
@click.pass_context
def remove_at(ctx: click.Context, file_path: str | None, item_type: str | None,
              no_auto_flush: bool, index: int) -> None:
    """Remove the element at INDEX."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        items.remove_at(index)


@main.command("set")
@store_options
@click.argument("index", type=int)
@click.argument("value")
@click.pass_context
def set_(ctx: click.Context, file_path: str | None, item_type: str | None,
         no_auto_flush: bool, index: int, value: str) -> None:
    """Set INDEX to VALUE, padding with empty lines past the end."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        items.set_element(index, _parse(items, value))


@main.command()
@store_options
@click.pass_context
def clear(ctx: click.Context, file_path: str | None, item_type: str | None, no_auto_flush: bool) -> None:
    """Remove every element and delete the file."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        items.clear()


@main.command()
@store_options
@click.argument("value")
@click.pass_context
def contains(ctx: click.Context, file_path: str | None, item_type: str | None,
             no_auto_flush: bool, value: str) -> None:
    """Print whether VALUE is present."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        click.echo("true" if items.contains(_parse(items, value)) else "false")


@main.command("index-of")
@store_options
@click.argument("value")
@click.pass_context
def index_of(ctx: click.Context, file_path: str | None, item_type: str | None,
             no_auto_flush: bool, value: str) -> None:
    """Print the index of VALUE, or -1."""
    with open_list(ctx, file_path, item_type, no_auto_flush) as items:
        click.echo(items.index_of(_parse(items, value)))


if __name__ == "__main__":
    main()
