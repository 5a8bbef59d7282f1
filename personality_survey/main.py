from __future__ import annotations

import logging
import os

from personality_survey.core.config import settings
from personality_survey.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _attach_debugger(port: int) -> None:
    """Block until a debugpy client attaches; the listener survives Streamlit reruns."""

    import debugpy

    if os.environ.get("DEBUGPY_LISTENING") != "1":
        debugpy.listen(("0.0.0.0", port))
        os.environ["DEBUGPY_LISTENING"] = "1"
        logger.info("Waiting for debugger attach on port %s", port)

    if not debugpy.is_client_connected():
        debugpy.wait_for_client()
        logger.info("Debugger attached")


if settings.debug_attach:
    configure_logging(settings.log_level)
    _attach_debugger(settings.debug_port)

from personality_survey.UI import run_app


def main() -> None:
    """Launch the Streamlit survey UI."""

    configure_logging(settings.log_level)
    run_app()


if __name__ == "__main__":
    main()
