#!/usr/bin/env python3
"""
InfluenceAI

Look up a public figure, extract key facts and compute an influence score.

Usage:
    influenceai "Taylor Swift" [options]
    influenceai --serve [options]
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from influenceai.config.loader import load_config, get_api_key
from influenceai.search.client import SearchError, lookup_celebrity

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI flags."""
    parser = argparse.ArgumentParser(
        prog='influenceai',
        description='Search-backed influence scores for public figures'
    )

    parser.add_argument('name', nargs='?',
                        help='Name of the person to look up')

    # Output options
    parser.add_argument('--json', action='store_true',
                        help='Output as JSON')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colors')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    # Web app
    parser.add_argument('--serve', action='store_true',
                        help='Start web app server')
    parser.add_argument('--port', type=int, default=None,
                        help='Port for web app (default: 8080)')
    parser.add_argument('--host', default=None,
                        help='Host for web app (default: 127.0.0.1)')
    parser.add_argument('--no-browser', action='store_true',
                        help='Don\'t open browser on serve')

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging for CLI and server runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    config = load_config()

    if args.serve:
        _run_serve(config, args)
        return 0

    if not args.name or not args.name.strip():
        parser.error('a name is required unless --serve is given')

    return _run_lookup(config, args)


def _run_lookup(config: Dict[str, Any], args) -> int:
    """Look up one name and print the result."""
    api_key = get_api_key(config)
    if not api_key:
        print(f"Error: set the {config['api_key_env']} environment variable "
              f"to your SerpAPI key.", file=sys.stderr)
        return 1

    try:
        celebrity = asyncio.run(lookup_celebrity(args.name, api_key, config))
    except SearchError as e:
        logger.debug("Lookup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(celebrity.to_dict(), indent=2))
        return 0

    from influenceai.output.formatter import format_celebrity
    color_enabled = config['display'].get('color_enabled', True) and not args.no_color
    print(format_celebrity(
        celebrity,
        color_enabled=color_enabled,
        bar_width=config['display'].get('bar_width', 20),
    ))
    return 0


def _run_serve(config: Dict[str, Any], args):
    """Start the web app server."""
    import uvicorn

    from influenceai.server.app import create_app
    app = create_app(config=config)

    host = args.host or config['server']['host']
    port = args.port or config['server']['port']

    if not get_api_key(config):
        print(f"Warning: {config['api_key_env']} is not set; lookups will fail "
              f"until it is exported.")

    url = f"http://{host}:{port}"
    print(f"\nStarting InfluenceAI at {url}")
    print("Press Ctrl+C to stop\n")

    if not args.no_browser:
        import webbrowser
        import threading
        threading.Timer(1.0, webbrowser.open, args=[url]).start()

    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == '__main__':
    sys.exit(main())
