# Application layer: dispatch of one canary action per invocation.

from canary.application.action_dispatcher import ActionDispatcher

__all__ = ["ActionDispatcher"]
