import logging
import sys
from typing import Any

import click

from po2elm import config as config_loader
from po2elm import generator, parser
from po2elm.exceptions import Po2ElmError
from po2elm.version import __version__

logger = logging.getLogger(__name__)


def load(config_folder: str) -> dict[str, Any]:
    try:
        config = config_loader.load_config(config_folder)
    except Po2ElmError as exc:
        logger.error(str(exc))
        sys.exit(1)
    config_loader.setup_logging(config)
    return config


@click.group()
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.version_option(version=__version__, prog_name="po2elm")
@click.pass_context
def cli(ctx: click.Context, config_folder: str) -> None:
    ctx.obj = load(config_folder)


@cli.command("generate")
@click.argument("directory", type=click.Path(file_okay=False))
@click.pass_obj
def generate(config: dict[str, Any], directory: str) -> None:
    """Print the Elm strings module for the catalogs in DIRECTORY."""
    try:
        catalogs = parser.parse_catalogs(directory)
        source = generator.render_module(
            catalogs,
            module_name=config["output"]["module"],
            lang_module=config["output"]["lang_module"],
        )
    except Po2ElmError as exc:
        logger.error(str(exc))
        sys.exit(1)
    click.echo(source, nl=False)


@cli.command("lang")
@click.argument("directory", type=click.Path(file_okay=False))
@click.pass_obj
def lang(config: dict[str, Any], directory: str) -> None:
    """Print the Elm language type matching the catalogs in DIRECTORY."""
    try:
        catalogs = parser.parse_catalogs(directory)
        source = generator.render_lang_module(
            [po.lang for po in catalogs], module_name=config["output"]["lang_module"]
        )
    except Po2ElmError as exc:
        logger.error(str(exc))
        sys.exit(1)
    click.echo(source, nl=False)


@cli.command("check")
@click.argument("directory", type=click.Path(file_okay=False))
def check(directory: str) -> None:
    """Report missing translations and function name collisions."""
    try:
        catalogs = parser.parse_catalogs(directory)
    except Po2ElmError as exc:
        logger.error(str(exc))
        sys.exit(1)

    keys = generator.unify_keys(catalogs)
    missing = generator.find_missing(catalogs, keys)
    collisions = generator.find_collisions(keys)

    for item in missing:
        click.echo(f'{item.lang}: "{item.msgid}" -> Translation missing')
    for name, group in collisions.items():
        msgids = ", ".join(f'"{key.msgid}"' for key in group)
        click.echo(f"{name}: {msgids} -> Function name collision")

    if missing or collisions:
        logger.error(
            f"Found {len(missing)} missing translations and {len(collisions)} collisions"
        )
        sys.exit(1)
    logger.info(f"No issues found in {len(catalogs)} catalogs ({len(keys)} keys)")


@cli.command("format")
@click.argument("file", type=click.Path(dir_okay=False))
def format_catalog(file: str) -> None:
    """Print FILE as normalized catalog text."""
    try:
        po = parser.parse_po_file(file)
    except Po2ElmError as exc:
        logger.error(str(exc))
        sys.exit(1)
    click.echo(po.to_po(), nl=False)
