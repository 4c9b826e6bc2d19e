"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import uvicorn
from loguru import logger

from welcome_service.bootstrap import bootstrap_create_application
from welcome_service.config import SettingsLoadError, config_load_settings

# loguru has TRACE and SUCCESS, uvicorn has no SUCCESS
UVICORN_LOG_LEVELS = {
    "TRACE": "trace",
    "DEBUG": "debug",
    "INFO": "info",
    "SUCCESS": "info",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "critical",
}


def main(argv: list[str] | None = None) -> None:
    """Start the HTTP listener with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration validation or port binding fails.
    """

    argument_parser = argparse.ArgumentParser(description="CI welcome service runtime entrypoint")
    argument_parser.add_argument("--host", dest="host", type=str, help="Override the HOST setting")
    argument_parser.add_argument("--port", dest="port", type=int, help="Override the PORT setting")
    parsed_arguments = argument_parser.parse_args(argv)

    overrides = {
        key: value
        for key, value in (("host", parsed_arguments.host), ("port", parsed_arguments.port))
        if value is not None
    }
    try:
        settings = config_load_settings(**overrides)
    except SettingsLoadError as error:
        logger.error("{}", error)
        raise SystemExit(1) from error

    application = bootstrap_create_application(settings=settings)
    server_config = uvicorn.Config(
        application,
        host=settings.host,
        port=settings.port,
        log_level=UVICORN_LOG_LEVELS[settings.log_level],
    )
    try:
        bound_socket = server_config.bind_socket()
    except SystemExit:
        logger.error("Could not bind {}:{}, is another instance running?", settings.host, settings.port)
        raise

    logger.info("Server is running on port {} in {} mode", settings.port, settings.app_env)
    uvicorn.Server(server_config).run(sockets=[bound_socket])


if __name__ == "__main__":
    main()
