from __future__ import annotations

import logging

import pytest


@pytest.fixture
def diagnostics(caplog):
    """
    caplog scoped to the rdsdec loggers, capturing notices and errors.
    Use diagnostics.messages / diagnostics.records in assertions.
    """
    caplog.set_level(logging.INFO, logger="rdsdec")
    return caplog
