from __future__ import annotations

import pytest

from tests.helpers import RecordingLogger


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()
