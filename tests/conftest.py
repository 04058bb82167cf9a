import pytest

from multiflag import _registrars, _settings


@pytest.fixture(autouse=True)
def reset_global_state():
    """Restore the process-wide config and parser after each test."""
    _settings.reset()
    _registrars.reset_default_parser()
    yield
    _settings.reset()
    _registrars.reset_default_parser()
