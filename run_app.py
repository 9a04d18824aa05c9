#!/usr/bin/env python3
"""
Runner script for the Flask application.
Sets up logging, builds the app from configuration and serves it.
"""

import argparse
import sys
from pathlib import Path

# Add the current directory to Python path
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from config_manager import ConfigManager
from name_service.logging_config import setup_logging, get_logger
from app.main import create_app


def main() -> None:
    parser = argparse.ArgumentParser(description="Baby name picker web service")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--config", type=str, default="web_app_config.json", help="Path to config file")
    args = parser.parse_args()

    config_manager = ConfigManager(args.config)
    app_config = config_manager.get_app_config()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(debug=app_config.debug)
    logger = get_logger(__name__)

    app = create_app(config_manager)
    logger.info("Serving on %s:%s", app_config.host, app_config.port)
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )


if __name__ == "__main__":
    main()
