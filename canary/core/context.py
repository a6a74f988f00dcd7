# canary/core/context.py

import contextvars

pid_ctx = contextvars.ContextVar("pid", default=None)
action_ctx = contextvars.ContextVar("action", default=None)
