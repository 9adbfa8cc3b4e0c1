#!/usr/bin/env python3
"""Ink Canvas - web app for drawing ink strokes with touch input.

Usage:
    python canvas_editor.py --port 5000 --log-level DEBUG
"""

import argparse

from canvas_config import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT
from canvas_flask import app, configure_logging
import canvas_routes  # noqa: F401 - registers routes


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Serve the ink canvas')
    parser.add_argument('--host', default=DEFAULT_HOST, help='Interface to bind')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT, help='Port to listen on')
    parser.add_argument('--debug', action='store_true', help='Enable Flask debug mode')
    parser.add_argument('--log-level', default=DEFAULT_LOG_LEVEL,
                        help='DEBUG, INFO, WARNING or ERROR')
    parser.add_argument('--log-file', default=None, help='Also log to this file')
    return parser


def main(argv=None) -> None:
    args = _create_argument_parser().parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == '__main__':
    main()
