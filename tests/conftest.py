import pytest
from PIL import Image


@pytest.fixture
def solid_png(tmp_path):
    """Factory writing a solid-colour RGBA PNG and returning its path."""

    def _make(name="solid.png", size=(300, 150), colour=(103, 80, 164, 255)):
        path = tmp_path / name
        Image.new("RGBA", size, colour).save(path)
        return path

    return _make
