"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or renders a single badge to stdout.
"""

import argparse
import logging
import sys

import uvicorn

from status_badge.badge import badge_parse_selector
from status_badge.bootstrap import bootstrap_create_application, bootstrap_create_badge_service
from status_badge.config import config_load_settings


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Application status badge runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "render"),
        help="Runtime command: `api` starts server, `render` writes one badge SVG to stdout",
        type=str,
    )
    argument_parser.add_argument("--name", dest="name", type=str, help="Application name for `render`")
    argument_parser.add_argument(
        "--project",
        dest="projects",
        action="append",
        default=[],
        type=str,
        help="Project name for `render`; may be repeated",
    )
    argument_parser.add_argument(
        "--revision",
        dest="revision",
        action="store_true",
        help="Request the revision suffix for `render`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if parsed_arguments.command == "render":
        badge_service = bootstrap_create_badge_service(settings=settings)
        rendered_badge = badge_service.badge_build(
            selector=badge_parse_selector(entity_name=parsed_arguments.name, project_names=parsed_arguments.projects),
            revision_requested=parsed_arguments.revision,
        )
        sys.stdout.buffer.write(rendered_badge.content)
        return

    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
