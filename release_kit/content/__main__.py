#!/usr/bin/env python3
"""
Content Directory Updater - CLI Entry Point
===========================================

Usage:
    python -m release_kit.content
    python -m release_kit.content --content-dir site/content
    python -m release_kit.content --command "csdx cm:export -k <key> -d content"
"""

import argparse
import sys
from pathlib import Path

from ..config import ContentConfig, DEFAULT_EXPORT_TEMPLATE
from ..runner import SubprocessRunner
from ..utils import print_header, print_error
from .refresher import refresh_content


EPILOG = f"""
Export command used (unless --command / CONTENT_EXPORT_COMMAND is set):
  {DEFAULT_EXPORT_TEMPLATE}

Environment:
  CONTENTSTACK_STACK_API_KEY   Stack API key passed to the exporter
  CONTENT_DIR                  Export directory (default: content)
  CONTENT_EXPORT_COMMAND       Full export command line
"""


def cmd_refresh(args) -> int:
    """Delete the content directory and export fresh content."""
    try:
        config = ContentConfig.from_env(
            cwd=args.cwd,
            content_dir=args.content_dir,
            export_command=args.command,
            api_key=args.stack_api_key,
        )
        export_command = config.build_export_command()

        print_header("Content Directory Updater", f"Directory: {config.content_dir}")
        refresh_content(config.content_dir, export_command, SubprocessRunner(cwd=config.cwd))
        return 0

    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except Exception as e:
        print_error(f"Error updating content directory: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="content-refresh",
        description="Delete the content directory and export fresh content",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--content-dir", type=str, metavar="DIR",
                        help="Export directory (default: $CONTENT_DIR or 'content')")
    parser.add_argument("--command", type=str, metavar="CMD",
                        help="Full export command line (overrides the default template)")
    parser.add_argument("--stack-api-key", type=str, metavar="KEY",
                        help="Stack API key for the default export command")
    parser.add_argument("--cwd", type=Path,
                        help="Working directory for the export (default: current directory)")

    try:
        args, extra = parser.parse_known_args(argv)
    except SystemExit as e:
        return 0 if e.code in (0, None) else 1

    if extra:
        print_error(f"Unknown option(s): {' '.join(extra)}")
        return 1

    return cmd_refresh(args)


if __name__ == "__main__":
    sys.exit(main())
