"""Workflow orchestration for ytguard."""

from ytguard.workflow.processor import RunResult, WrapperProcessor

__all__ = [
    "RunResult",
    "WrapperProcessor",
]
