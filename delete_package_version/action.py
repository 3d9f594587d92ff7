"""
Action entry point.

Applies the version filters, runs the deletion against the registry and
turns registry failures into a failed step.
"""

import logging
import os
import sys
from collections.abc import Callable

from delete_package_version.client import RegistryClient
from delete_package_version.config import ActionConfig
from delete_package_version.exceptions import ConfigurationError, RegistryError
from delete_package_version.filters import evaluate_filters
from delete_package_version.logging import (
    configure_logging,
    get_logger,
    mask_secret,
)
from delete_package_version.types.packages import RunOutcome
from delete_package_version.workflow import delete_package_version

logger = get_logger()

ClientFactory = Callable[[ActionConfig], RegistryClient]


def default_client_factory(config: ActionConfig) -> RegistryClient:
    return RegistryClient(token=config.token, base_url=config.api_url)


def set_failed(message: str) -> None:
    """Report the step as failed; the caller exits non-zero."""
    logger.error(message)


def run(
    config: ActionConfig,
    client_factory: ClientFactory = default_client_factory,
) -> RunOutcome:
    """
    Run one deletion.

    Args:
        config: Inputs and repository context for this run
        client_factory: Builds the registry client from the configuration

    Returns:
        RunOutcome describing how the run ended. Registry errors are logged
        and reported as FAILED, never raised.
    """
    request = config.request
    name, version = request.coordinate.package_name, request.version
    package_type = request.coordinate.package_type
    owner, repo = request.coordinate.org, config.context.repo
    label = f"[{name}@{version}] ({package_type})"

    filtered = evaluate_filters(version, request.must_start_with, request.must_end_with)
    if not filtered.proceed:
        logger.info(
            f"Skipping deletion of package [{name}] version [{version}] "
            f"in organization [{owner}] as {filtered.reason}"
        )
        return RunOutcome.SKIPPED

    try:
        with client_factory(config) as client:
            logger.info(f"Deleting package version: {label} from [{owner}/{repo}]")

            did_delete = delete_package_version(client.packages, request.coordinate, version)

            if did_delete:
                logger.info(f"Deleted package version: {label} from [{owner}/{repo}]")
                return RunOutcome.DELETED

            logger.info(f"Package version already absent: {label} in [{owner}/{repo}]")
            return RunOutcome.ABSENT
    except RegistryError as error:
        logger.error(f"Error: Failed to delete package version: {label} from [{owner}/{repo}]")
        set_failed(f"Error: Failed with status: [{error.status}] and message: [{error.message}]")
        return RunOutcome.FAILED


def main() -> int:
    """Console entry point; returns the process exit code."""
    debug = os.environ.get("RUNNER_DEBUG") == "1"
    configure_logging(level=logging.DEBUG if debug else logging.INFO)

    try:
        config = ActionConfig.from_env()
    except ConfigurationError as error:
        set_failed(error.message)
        return 1

    mask_secret(config.token)

    outcome = run(config)
    return 1 if outcome is RunOutcome.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
