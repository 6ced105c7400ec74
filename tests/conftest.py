import pytest
from graphsynth import log


@pytest.fixture(autouse=True)
def quiet_console():
    log.setup(console=False)
    yield
    log.setup(console=False)
