from __future__ import annotations

import pytest

from evently.config import reset_config


@pytest.fixture(autouse=True)
def _reset_evently_config():
    """Keep configuration changes from leaking between tests."""
    reset_config()
    yield
    reset_config()
