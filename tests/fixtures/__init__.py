"""Test fixtures for dm8-schema tests."""

from .fake_executor import FakeExecutor, RecordingConnection

__all__ = [
    "FakeExecutor",
    "RecordingConnection",
]
