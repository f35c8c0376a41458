"""Main entry point for the homepage builder."""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .utils.error_handling import ConfigError
from .utils.logging_setup import setup_logging

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="homepage", description="Render the academic homepage")
    parser.add_argument("--log-dir", default=None, help="Also write logs to a timestamped file here")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Write the rendered page to disk")
    build.add_argument("--output", default=None, help="Output HTML path (default: OUTPUT_FILE under SITE_ROOT)")
    build.add_argument("--bib", default=None, help="Bibliography path or URL")

    serve = subparsers.add_parser("serve", help="Run the preview server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--debug", action="store_true")
    serve.add_argument("--bib", default=None, help="Bibliography path or URL")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Program entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, os.getenv("LOG_LEVEL", "INFO"))

    try:
        config = Config()
        if args.bib:
            config.BIB_PATH = args.bib
        config.validate()
    except ConfigError as e:
        logging.error(f"Invalid configuration: {e}")
        return 1

    if args.command == "build":
        from .page import write_page
        try:
            path = write_page(config, args.output)
        except OSError as e:
            logging.error(f"Could not write page: {e}")
            return 1
        print(f"Saved to {path}")
        return 0

    from .app import create_app
    create_app(config).run(host=args.host, port=args.port, debug=args.debug)
    return 0

if __name__ == "__main__":
    sys.exit(main())
