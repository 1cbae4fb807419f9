"""
Shared fixtures and fakes.

Network probers are replaced with in-memory fakes so classifier and
executor tests never touch the network.
"""

import logging

import pytest

from fakes import FakeHttpProber, FakeProber


@pytest.fixture
def fake_http():
    return FakeHttpProber()


@pytest.fixture
def fake_dns():
    return FakeProber()


@pytest.fixture
def fake_whois():
    return FakeProber()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """configure_logging() detaches the package logger; undo it after each test."""
    yield
    logger = logging.getLogger("domain_liveness")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
