import logging

import pytest

from ipprefix.config import PrefixConfig, set_config
from ipprefix.logging_config import reset_error_stats


@pytest.fixture(autouse=True)
def default_config():
    set_config(PrefixConfig())
    reset_error_stats()
    yield
    set_config(PrefixConfig())
    reset_error_stats()

    logger = logging.getLogger("ipprefix")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
