import pytest

from utils.image_io import save_image
from utils.test_images import generate_photo, generate_palette_image, palette_to_image


@pytest.fixture(scope="session")
def photo():
    return generate_photo(256)


@pytest.fixture
def photo_png(tmp_path, photo):
    path = tmp_path / "photo.png"
    save_image(photo, path)
    return path


@pytest.fixture
def palette_files(tmp_path):
    """The same palette pixels encoded as PNG and GIF."""
    img = palette_to_image(*generate_palette_image())
    png, gif = tmp_path / "blocks.png", tmp_path / "blocks.gif"
    img.save(png)
    img.save(gif)
    return png, gif
