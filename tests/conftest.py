import sys
import os

import pytest

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from css3images.backends.base import RasterBackend


class RecordingBackend(RasterBackend):
    """Backend that records requests and returns plain tuples instead of images."""

    def __init__(self):
        self.rects = []
        self.stacks = []
        self.saved = []

    def gradient_rect(self, width, height, start, end, direction=None, unit_transform=None, bound_type=None):
        rect = ("rect", width, height, start, end)
        self.rects.append(rect)
        return rect

    def stack_vertical(self, images):
        self.stacks.append(list(images))
        return ("stack", tuple(images))

    def save(self, image, path, **options):
        self.saved.append((image, path, options))


@pytest.fixture
def recording_backend():
    return RecordingBackend()


@pytest.fixture
def two_stops():
    return [["#000", 0], ["#fff", 17]]


@pytest.fixture
def three_stops():
    return [["#000", 0], ["#fff", 17], ["#ccc", 18]]
