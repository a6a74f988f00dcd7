"""Observability layer: failure classification."""

from canary.observability.failure_classifier import (
    EXIT_SUCCESS,
    FailureCategory,
    FailureClassifier,
    exit_code_for,
)

__all__ = [
    "EXIT_SUCCESS",
    "FailureCategory",
    "FailureClassifier",
    "exit_code_for",
]
