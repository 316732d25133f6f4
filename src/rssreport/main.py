"""Command line entry point.

Asks for a feed list document and an output base name (unless given as
options), renders every listed feed and writes the linking index page.
"""

import argparse
import sys
from pathlib import Path

from rssreport.config.settings import Settings, settings
from rssreport.exceptions import RSSReportError
from rssreport.services.feed_processor import FeedProcessor
from rssreport.services.index_builder import IndexBuilder
from rssreport.sources.factory import create_source_factory
from rssreport.utils.logger import configure_logging, get_logger

FEED_LIST_PROMPT = "Enter an XML file: "
OUTPUT_PROMPT = "Enter a name for the output file: "


def build_arg_parser(config: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="rssreport - RSS 2.0 feeds to HTML tables")
    parser.add_argument(
        "--feed-list",
        help="Feed list XML document (URL or path); prompted for when omitted",
    )
    parser.add_argument(
        "--output",
        help="Base name of the output file, without .html; prompted for when omitted",
    )
    parser.add_argument(
        "--single",
        metavar="URL",
        help="Render one RSS feed into OUTPUT.html instead of a feed list",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output_dir,
        help=f"Directory for generated files (default: {config.output_dir})",
    )
    return parser


def prompt(message: str) -> str:
    print(message, end="", flush=True)
    return input().strip()


def run(args: argparse.Namespace, config: Settings) -> Path:
    """Run one report build and return the path of the page written."""
    source_factory = create_source_factory(config)
    processor = FeedProcessor(args.output_dir, source_factory)

    if args.single:
        output = args.output or prompt(OUTPUT_PROMPT)
        return processor.process(args.single, f"{output}.html").output_path

    feed_list = args.feed_list or prompt(FEED_LIST_PROMPT)
    output = args.output or prompt(OUTPUT_PROMPT)
    builder = IndexBuilder(processor, source_factory, default_title=config.index_title)
    return builder.build(feed_list, output)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_arg_parser(settings).parse_args(argv)

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_json,
    )
    logger = get_logger(settings.app_name)

    try:
        path = run(args, settings)
    except RSSReportError as e:
        logger.error("Report failed", error=str(e))
        return 1

    logger.info("Report written", path=str(path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
