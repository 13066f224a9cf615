# File: tests/conftest.py

import os
import sys
import logging
import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps library debug output visible to caplog without flooding the console.
    """
    logging.getLogger("housekeeping").setLevel(logging.DEBUG)
    yield
