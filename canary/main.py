# canary/main.py

import getpass
import logging
import os
import sys
from typing import Optional, Sequence

from canary.application.action_dispatcher import ActionDispatcher
from canary.config.logging import configure_logging
from canary.config.settings import CanarySettings, get_settings
from canary.core.context import pid_ctx
from canary.domain.exceptions import CanaryError, ExecutionError, UsageError
from canary.domain.models.invocation import InvocationContext
from canary.observability.failure_classifier import (
    EXIT_SUCCESS,
    FailureClassifier,
    exit_code_for,
)

logger = logging.getLogger(__name__)


def build_context(
    argv: Sequence[str],
    settings: CanarySettings,
    program_name: Optional[str] = None,
) -> InvocationContext:
    return InvocationContext(
        program_name=program_name or os.path.basename(sys.argv[0]) or settings.app_name,
        argv=tuple(argv),
        pid=os.getpid(),
        username=getpass.getuser(),
        log_file=settings.log_file,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point. Returns the process exit status."""
    settings = get_settings()
    configure_logging(settings.log_level)

    context = build_context(sys.argv[1:] if argv is None else argv, settings)
    pid_ctx.set(context.pid)
    dispatcher = ActionDispatcher(context, wrapper_name=settings.wrapper_name)

    try:
        request = dispatcher.parse()
    except UsageError as e:
        print(e.message)
        return exit_code_for(FailureClassifier.classify(e))

    try:
        output = dispatcher.execute(request)
    except (ExecutionError, OSError) as e:
        category = FailureClassifier.classify(e)
        message = e.message if isinstance(e, CanaryError) else str(e)
        logger.error(
            "action_failed",
            extra={"category": category.value, "error": message},
        )
        print(f"{context.program_name}: {message}", file=sys.stderr)
        return exit_code_for(category)

    if output:
        print(output)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
