import logging

import pytest

from qa_types.core.logging.builder import setup_logging

from ..conftest import make_test_settings


@pytest.fixture(autouse=True)
def restore_logging(request):
    """Tests here reconfigure logging (often onto capsys streams); put the session setup back afterwards."""
    yield
    setup_logging(make_test_settings())
    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)
