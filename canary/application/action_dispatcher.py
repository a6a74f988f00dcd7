"""Action dispatcher: validate, execute one canary action, audit it once."""

import logging
from typing import Any, Callable, Dict, Optional

from canary import __version__
from canary.audit.audit_logger import AuditLogger
from canary.config.settings import DEFAULT_WRAPPER_NAME
from canary.core.context import action_ctx
from canary.domain.exceptions import UsageError
from canary.domain.models.action import (
    ActionRequest,
    FileActivity,
    FileRequest,
    NetProtocol,
    NetRequest,
    ProcRequest,
    VersionRequest,
)
from canary.domain.models.invocation import InvocationContext
from canary.domain.validators.action_validator import parse_action_request
from canary.infrastructure.audit_log.jsonl_repository import JsonlAuditRepository
from canary.infrastructure.filesystem.file_actions import create_file, delete_file, modify_file
from canary.infrastructure.network.socket_sender import send_tcp, send_udp
from canary.infrastructure.process.spawner import run_process

logger = logging.getLogger(__name__)

Fields = Dict[str, Any]

_NET_SENDERS: Dict[NetProtocol, Callable[[str, str, str], Fields]] = {
    NetProtocol.TCP: send_tcp,
    NetProtocol.UDP: send_udp,
}


def _run_file(request: FileRequest) -> Fields:
    if request.activity is FileActivity.CREATE:
        return create_file(request.filename)
    if request.activity is FileActivity.DELETE:
        return delete_file(request.filename)
    return modify_file(request.filename, request.content or "")


class ActionDispatcher:
    """
    One invocation, one action. Usage problems come back as a string and touch nothing;
    execution failures propagate to the caller and leave no audit record.
    """

    def __init__(
        self,
        context: InvocationContext,
        audit_logger: Optional[AuditLogger] = None,
        wrapper_name: str = DEFAULT_WRAPPER_NAME,
    ) -> None:
        self._context = context
        self._audit_logger = audit_logger or AuditLogger(
            context, JsonlAuditRepository(context.log_file)
        )
        self._wrapper_name = wrapper_name

    def run(self) -> Optional[str]:
        """
        Returns the usage line for malformed input, the version for `version`,
        None once an action has been performed and audited.
        """
        try:
            request = self.parse()
        except UsageError as e:
            logger.info("usage_error", extra={"usage": e.message})
            return e.message
        return self.execute(request)

    def parse(self) -> ActionRequest:
        """Validate the argument shape. Raises UsageError."""
        return parse_action_request(self._context.argv, self._wrapper_name)

    def execute(self, request: ActionRequest) -> Optional[str]:
        """Perform a parsed request and append its audit record."""
        if isinstance(request, VersionRequest):
            return __version__

        action_ctx.set(request.kind.value)
        fields = self._perform(request)
        self._audit_logger.append(fields)
        logger.info("action_completed", extra={"proc_command": self._context.proc_command})
        return None

    def _perform(self, request: ActionRequest) -> Fields:
        if isinstance(request, ProcRequest):
            return run_process(request.command)
        if isinstance(request, FileRequest):
            return _run_file(request)
        if isinstance(request, NetRequest):
            return _NET_SENDERS[request.protocol](request.host, request.port, request.data)
        raise TypeError(f"unsupported action request: {type(request).__name__}")
