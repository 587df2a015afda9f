"""
Shared fixtures for jsoncall tests.
"""

import pytest

from jsoncall import ExecutionContext


@pytest.fixture
def recording_factory():
    """Context factory that records how often it was called."""
    calls = []

    def factory():
        ctx = ExecutionContext(run_id=f"run-{len(calls) + 1}")
        calls.append(ctx)
        return ctx

    factory.calls = calls
    return factory


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path."""
    def write(text: str):
        path = tmp_path / "config.yml"
        path.write_text(text, encoding="utf-8")
        return path
    return write
