import argparse
import logging
import logging.config
import sys
import traceback

import uvicorn

from .config.models import validate_model_paths
from .config.server import parse_listen_address
from .config.settings import config


def setup_logging():
    """Setup logging configuration"""
    logging.config.dictConfig(config["logging"])


def validate_setup(model_configs) -> bool:
    """Validate the setup before starting the server"""
    try:
        validate_model_paths(model_configs)
        return True

    except Exception as e:
        print(f"[FAIL] Setup validation failed: {e}")
        return False


def main(argv=None):
    """Main entry point"""

    parser = argparse.ArgumentParser(description="Face Detection API")
    parser.add_argument(
        "-l",
        "--listen",
        type=str,
        help="Listen address as host:port (default: 127.0.0.1:8000)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    logger = logging.getLogger(__name__)

    if not validate_setup(config["models"]):
        print("Setup validation failed. Please check the configuration.")
        sys.exit(1)

    server_config = config["server"].copy()

    if args.listen:
        try:
            server_config["host"], server_config["port"] = parse_listen_address(
                args.listen
            )
        except ValueError as e:
            parser.error(str(e))

    try:
        from .main import app

        logger.info(f"Listening on: {server_config['host']}:{server_config['port']}")

        uvicorn.run(
            app,
            host=server_config["host"],
            port=server_config["port"],
            log_level=server_config["log_level"],
            log_config=config["logging"],
            access_log=server_config["access_log"],
        )

        logger.info("Server stopped gracefully")

    except KeyboardInterrupt:
        logger.info("Received KeyboardInterrupt - exiting...")
        sys.exit(0)
    except SystemExit:
        logger.info("Server exiting...")
        raise
    except Exception as e:
        logger.error(f"Server error: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
