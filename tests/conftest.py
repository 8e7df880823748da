import pytest


@pytest.fixture
def solid_red():
    return lambda x, y: (255, 0, 0, 255)
