import numpy as np
import pytest
from PIL import Image


def gradient(width, height):
    xs = np.linspace(0, 255, width, dtype=np.uint8)
    ys = np.linspace(0, 255, height, dtype=np.uint8)
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[..., 0] = xs[None, :]
    arr[..., 1] = ys[:, None]
    arr[..., 2] = 128
    arr[..., 3] = 255
    return arr


@pytest.fixture
def make_skin(tmp_path):
    def make(width, height, name="skin.png", mode="RGBA", **save_args):
        img = Image.fromarray(gradient(width, height))
        if mode != "RGBA":
            img = img.convert(mode)
        path = tmp_path / name
        img.save(path, **save_args)
        return path
    return make
