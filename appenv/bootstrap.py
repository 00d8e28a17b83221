"""
Bootstrap entry points, one per build flavor.

Each entry point selects its environment before anything else runs, sets
up logging from the resolved bundle, then hands off to the shared
application startup.
"""

import argparse
import os
import sys
from typing import Any, Callable, Dict, Optional, Union

from appenv.config import create_registry, list_available_environments
from appenv.config.core import EnvironmentRegistry
from appenv.core.enums import Environment
from appenv.core.exceptions import ConfigurationError
from appenv.environment import get_registry, install_registry
from appenv.logger import get_appenv_logger, setup_logging

ENVIRONMENT_VARIABLE = "APPENV_ENVIRONMENT"

logger = get_appenv_logger().bind(component="Bootstrap")


def common_main(registry: EnvironmentRegistry) -> Dict[str, Any]:
    """Shared application startup; every flavor ends up here."""
    summary = {
        'environment': registry.current_environment().value,
        'display_name': registry.display_name(),
        'base_url': registry.base_url()
    }
    logger.info("Application started", **summary)
    return summary


def bootstrap(environment: Union[Environment, str],
              app_main: Callable[[EnvironmentRegistry], Any] = common_main,
              registry: Optional[EnvironmentRegistry] = None,
              config_dir: Optional[str] = None) -> Any:
    """
    Select ``environment`` and run ``app_main``.

    Args:
        environment: Flavor to select
        app_main: Shared startup, called with the initialized registry
        registry: Registry to initialize; defaults to the process-wide one
        config_dir: Directory holding environments.yaml overrides, used
            only when no registry is given

    Returns:
        Whatever ``app_main`` returns
    """
    if registry is None:
        registry = install_registry(create_registry(config_dir)) if config_dir else get_registry()

    config = registry.set_environment(environment)

    setup_logging(
        json_logs=bool(config.get('json_logs', False)),
        log_level=str(config.get('log_level', 'INFO')),
        force=True
    )
    logger.info("Bootstrap complete", environment=config.environment.value,
                base_url=config.base_url)

    return app_main(registry)


def main_dev() -> None:
    bootstrap(Environment.DEV)


def main_uat() -> None:
    bootstrap(Environment.UAT)


def main_prod() -> None:
    bootstrap(Environment.PROD)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appenv",
        description="Start the application for one build flavor"
    )
    parser.add_argument(
        "--environment", "-e",
        choices=list_available_environments(),
        type=str.lower,
        default=os.getenv(ENVIRONMENT_VARIABLE),
        help=f"Environment to select (default: ${ENVIRONMENT_VARIABLE})"
    )
    parser.add_argument(
        "--config-dir", "-c",
        default=None,
        help="Directory containing environments.yaml overrides"
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.environment:
        parser.error(f"no environment given; pass --environment or set {ENVIRONMENT_VARIABLE}")

    try:
        summary = bootstrap(args.environment, config_dir=args.config_dir)
    except ConfigurationError as e:
        logger.error("Bootstrap failed", kind=e.kind.value, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    for key, value in summary.items():
        print(f"{key}: {value}")
    return 0
