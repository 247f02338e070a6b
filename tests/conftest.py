import pytest
import numpy as np

from focus.config import Settings


def make_frame(h=120, w=160, background=0, center=200, radius=35):
    """Frame with a uniformly lit square of half-width `radius` in the middle."""
    frame = np.full((h, w, 3), background, dtype=np.uint8)
    cy, cx = h // 2, w // 2
    frame[max(0, cy - radius):cy + radius, max(0, cx - radius):cx + radius] = center
    return frame


class FakeSource:
    """Stands in for a camera: fixed dimensions, scripted frames, counted releases."""
    def __init__(self, frames=None, width=640, height=480, fail_reads=False):
        self.frames = list(frames) if frames is not None else []
        self.width = width
        self.height = height
        self.fail_reads = fail_reads
        self.reads = 0
        self.releases = 0

    def dimensions(self):
        return self.width, self.height

    def read(self):
        self.reads += 1
        if self.fail_reads:
            raise OSError("device busy")
        if not self.frames:
            return True, make_frame(self.height, self.width, radius=140)
        frame = self.frames.pop(0) if len(self.frames) > 1 else self.frames[0]
        return True, frame

    def release(self):
        self.releases += 1


@pytest.fixture
def settings():
    return Settings(SAMPLE_INTERVAL=0.05, GRACE_PERIOD=3.0, WARNING_COOLDOWN=5.0)


@pytest.fixture
def face_frame():
    return make_frame()


@pytest.fixture
def dark_frame():
    return make_frame(center=0)
