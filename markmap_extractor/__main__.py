import dataclasses
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click
from dotenv import load_dotenv

from markmap_extractor import MarkmapExtractor
from markmap_extractor.clipboard import Deliver, SystemClipboard
from markmap_extractor.config import ExtractorConfig
from markmap_extractor.dom.models import DocumentNode
from markmap_extractor.dom.soup import load_html_file
from markmap_extractor.messaging import EXTRACT_TEXT, MessageHandler

logger = logging.getLogger(__name__)


def extraction_options(func: Callable) -> Callable:
    """Options shared by every extraction command."""
    func = click.option("--include-hidden/--no-include-hidden", default=None,
                        help="Include elements hidden by display, visibility or opacity.")(func)
    func = click.option("--min-text-length", type=int, default=None,
                        help="Minimum length of a text fragment to keep.")(func)
    func = click.option("--max-depth", type=int, default=None,
                        help="Deepest indentation level to read.")(func)
    func = click.option("--no-max-depth", is_flag=True, default=False,
                        help="Read the whole tree regardless of depth.")(func)
    func = click.option("--no-copy", is_flag=True, default=False,
                        help="Print the text without copying it to the clipboard.")(func)
    return func


def build_config(
    include_hidden: Optional[bool],
    min_text_length: Optional[int],
    max_depth: Optional[int],
    no_max_depth: bool,
    headless: Optional[bool] = None,
) -> ExtractorConfig:
    """Environment configuration with command-line overrides applied."""
    overrides = {}
    if include_hidden is not None:
        overrides["include_hidden"] = include_hidden
    if min_text_length is not None:
        overrides["min_text_length"] = min_text_length
    if no_max_depth:
        overrides["max_depth"] = None
    elif max_depth is not None:
        overrides["max_depth"] = max_depth
    if headless is not None:
        overrides["headless"] = headless

    try:
        return dataclasses.replace(ExtractorConfig.from_env(), **overrides)
    except ValueError as e:
        raise click.UsageError(str(e))


def run_extraction(
    load_body: Callable[[], Optional[DocumentNode]],
    config: ExtractorConfig,
    deliver: Optional[Deliver],
) -> None:
    """Extract, print the text, then hand it to the clipboard."""
    handler = MessageHandler(load_body, options=config.to_options())
    response = handler.handle({"action": EXTRACT_TEXT})

    if not response.get("success"):
        click.echo(f"Extraction failed: {response.get('error', 'Unknown error')}", err=True)
        sys.exit(1)

    text = response["data"]
    click.echo(text)

    if deliver is None:
        return

    result = deliver(text)
    if result.success:
        click.echo("Text copied to the clipboard.", err=True)
    else:
        click.echo(f"Copy failed ({result.method}): {result.error}", err=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Extract page text as an indented outline for markmap."""
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("url")
@click.argument("url")
@click.option("--headless/--no-headless", default=None, help="Run Chrome without a window.")
@extraction_options
def extract_url(url: str, headless: Optional[bool], include_hidden: Optional[bool],
                min_text_length: Optional[int], max_depth: Optional[int],
                no_max_depth: bool, no_copy: bool) -> None:
    """Open URL in Chrome and extract its text."""
    config = build_config(include_hidden, min_text_length, max_depth, no_max_depth, headless)

    with MarkmapExtractor(config) as extractor:
        if not extractor.navigate_to(url):
            click.echo(f"Could not load {url}", err=True)
            sys.exit(1)

        run_extraction(
            extractor.snapshot_body,
            config,
            None if no_copy else extractor.copy_to_clipboard,
        )


@cli.command("file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@extraction_options
def extract_file(path: Path, include_hidden: Optional[bool], min_text_length: Optional[int],
                 max_depth: Optional[int], no_max_depth: bool, no_copy: bool) -> None:
    """Extract the text of a local HTML file."""
    config = build_config(include_hidden, min_text_length, max_depth, no_max_depth)
    logger.info(f"Reading {path}")

    run_extraction(
        lambda: load_html_file(path),
        config,
        None if no_copy else SystemClipboard(),
    )


def main():
    cli()


if __name__ == "__main__":
    main()
