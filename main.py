"""CLI entry point for the markdown wiki builder."""

import argparse
import sys
from pathlib import Path

from wikigen.build import build_wiki
from wikigen.utils.config import settings
from wikigen.utils.logger import get_logger

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert generated help topics into a Markdown wiki"
    )
    parser.add_argument("--working-folder", default=settings.working_folder,
                        help="Folder holding the <key>.md topic files")
    parser.add_argument("--output-folder", default=settings.output_folder,
                        help="Folder the finished wiki is copied to")
    parser.add_argument("--toc", default=settings.toc_file,
                        help="TOC file (default: <working folder>/../../toc.xml)")
    parser.add_argument("--default-topic", default=settings.default_topic,
                        help="Topic copied to Home.md when there is none")
    parser.add_argument("--append-md-extension", action="store_true",
                        default=settings.append_md_extension,
                        help="Add .md to sidebar links")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        import logging
        logging.getLogger().setLevel(logging.DEBUG)
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("wikigen"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    if not args.working_folder or not args.output_folder:
        parser.print_help()
        sys.exit(1)

    try:
        result = build_wiki(
            Path(args.working_folder),
            Path(args.output_folder),
            toc_file=Path(args.toc) if args.toc else None,
            default_topic=args.default_topic or None,
            append_md_extension=args.append_md_extension,
        )
    except OSError as exc:
        log.error("Wiki build failed: %s", exc)
        sys.exit(1)

    print(f"\nTopics: {result.topic_count}  Files copied: {result.file_count}\n")


if __name__ == "__main__":
    main()
