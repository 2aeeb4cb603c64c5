"""Tests for decoding sources and encoding results."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image as PILImage

from skin_converter.errors import DecodeFailureError, InvalidInputTypeError
from skin_converter.models.results import ReturnType
from skin_converter.repositories.skin_repository import PNG_DATA_URL_PREFIX, SkinRepository

from .conftest import from_png, solid, to_png


@pytest.fixture
def repository() -> SkinRepository:
    return SkinRepository()


def test_load_bytes(repository, noisy_pixels):
    pixels = noisy_pixels(64, 32)
    skin = repository.load(to_png(pixels))

    np.testing.assert_array_equal(skin.pixels, pixels)
    assert skin.natural_size == (64, 32)
    assert (skin.width, skin.height) == (64, 32)


def test_load_path(repository, noisy_pixels, tmp_path):
    pixels = noisy_pixels(64, 64)
    path = tmp_path / "skin.png"
    path.write_bytes(to_png(pixels))

    for source in (path, str(path)):
        np.testing.assert_array_equal(repository.load(source).pixels, pixels)


def test_load_data_uri(repository, noisy_pixels):
    pixels = noisy_pixels(64, 64)
    uri = PNG_DATA_URL_PREFIX + base64.b64encode(to_png(pixels)).decode("ascii")

    np.testing.assert_array_equal(repository.load(uri).pixels, pixels)


def test_rgb_source_gets_opaque_alpha(repository):
    buffer = io.BytesIO()
    PILImage.new("RGB", (64, 32), (10, 20, 30)).save(buffer, format="PNG")

    skin = repository.load(buffer.getvalue())

    assert skin.pixels.shape == (32, 64, 4)
    assert (skin.pixels[..., 3] == 255).all()


@pytest.mark.parametrize("source", [123, None, 4.5, ["skin.png"]])
def test_rejects_unknown_source_types(repository, source):
    with pytest.raises(InvalidInputTypeError):
        repository.load(source)


def test_wraps_decode_errors(repository):
    with pytest.raises(DecodeFailureError) as excinfo:
        repository.load(b"definitely not a png")
    assert excinfo.value.__cause__ is not None


def test_missing_file(repository, tmp_path):
    with pytest.raises(DecodeFailureError):
        repository.load(tmp_path / "missing.png")


def test_bad_data_uri(repository):
    with pytest.raises(DecodeFailureError):
        repository.load("data:image/png;base64,***")
    with pytest.raises(DecodeFailureError):
        repository.load("data:text/plain,hello")


def test_encode_modes(repository, noisy_pixels):
    pixels = noisy_pixels(64, 64)

    png = repository.encode(pixels, ReturnType.BUFFER_PNG)
    assert png.startswith(b"\x89PNG")
    np.testing.assert_array_equal(from_png(png), pixels)

    url = repository.encode(pixels, "base64/png")
    assert url.startswith(PNG_DATA_URL_PREFIX)
    np.testing.assert_array_equal(from_png(base64.b64decode(url[len(PNG_DATA_URL_PREFIX):])), pixels)

    raw = repository.encode(pixels, ReturnType.RAW_RGBA)
    np.testing.assert_array_equal(raw, pixels)
    assert raw is not pixels


def test_encode_rejects_unknown_mode(repository, noisy_pixels):
    with pytest.raises(InvalidInputTypeError):
        repository.encode(noisy_pixels(64, 64), "jpeg")


def test_iter_dir_filters_extensions(repository, tmp_path):
    (tmp_path / "a.png").write_bytes(b"")
    (tmp_path / "b.PNG").write_bytes(b"")
    (tmp_path / "notes.txt").write_bytes(b"")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.png").write_bytes(b"")

    names = [p.name for p in repository.iter_dir(tmp_path, exts={".png"})]
    assert names == ["a.png", "b.PNG"]

    names = sorted(p.name for p in repository.iter_dir(tmp_path, recursive=True, exts={".png"}))
    assert names == ["a.png", "b.PNG", "c.png"]


def test_iter_dir_needs_a_folder(repository, tmp_path):
    with pytest.raises(NotADirectoryError):
        list(repository.iter_dir(tmp_path / "nope"))


def test_oversized_raster_is_a_decode_failure(repository, monkeypatch):
    monkeypatch.setattr(PILImage, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(DecodeFailureError) as excinfo:
        repository.load(to_png(solid(64, 64)))
    assert isinstance(excinfo.value.__cause__, PILImage.DecompressionBombError)
