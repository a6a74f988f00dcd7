"""Validators for action argument shapes. Pure functions."""

from canary.domain.validators.action_validator import (
    join_tokens,
    parse_action_request,
    usage,
)

__all__ = [
    "join_tokens",
    "parse_action_request",
    "usage",
]
