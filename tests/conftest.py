import logging

import pytest
import structlog


def _quiet():
    structlog.reset_defaults()
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))


@pytest.fixture(autouse=True)
def quiet_logging():
    _quiet()
    yield
    structlog.reset_defaults()
