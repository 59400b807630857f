import pytest

from fractalview import console
from fractalview.pixelators import Rgba8


@pytest.fixture(autouse=True)
def quiet_console():
    console.set_verbose(False)
    yield
    console.set_verbose(False)


class RecordingPixelator:
    """Colors each point by its coordinates and remembers what it was asked."""

    def __init__(self):
        self.points = []

    def get_pixel(self, point):
        self.points.append(point)
        return Rgba8(int(point.x) % 256, int(point.y) % 256, 7, 255)


@pytest.fixture
def recorder():
    return RecordingPixelator()
