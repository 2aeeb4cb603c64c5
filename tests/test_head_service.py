"""Tests for head avatar composition and rescale."""

from __future__ import annotations

import numpy as np
import pytest

from skin_converter.errors import SizeTooSmallError
from skin_converter.services.head_service import HeadService

from .conftest import RED, WHITE, fill, solid

BLUE = (0, 0, 255, 255)


@pytest.fixture
def service() -> HeadService:
    return HeadService()


def _skin_with_face(face_color, hat_color=(0, 0, 0, 0), size: int = 64) -> np.ndarray:
    one_head = size // 8
    pixels = solid(size, size)
    fill(pixels, one_head, one_head, one_head, one_head, face_color)
    fill(pixels, 5 * one_head, one_head, one_head, one_head, hat_color)
    return pixels


@pytest.mark.parametrize("size", [0, 1, 7])
def test_size_too_small(service, size):
    with pytest.raises(SizeTooSmallError):
        service.check_size(size)


@pytest.mark.parametrize("size", [8, 12, 64])
def test_size_accepted(service, size):
    service.check_size(size)


def test_nearest_neighbour_upscale(service):
    pixels = _skin_with_face(RED)
    head = service.render_head(pixels, 16)

    assert head.shape == (16, 16, 4)
    assert (head == RED).all()


def test_every_source_pixel_becomes_a_block(service):
    pixels = _skin_with_face(RED)
    pixels[8, 8] = BLUE  # top-left pixel of the face

    head = service.render_head(pixels, 16)

    assert (head[0:2, 0:2] == BLUE).all()
    colours = {tuple(int(c) for c in px) for px in head.reshape(-1, 4)}
    assert colours == {RED, BLUE}
    assert int((head == BLUE).all(axis=-1).sum()) == 4


def test_opaque_white_hat_disappears(service):
    head = service.render_head(_skin_with_face(RED, WHITE), 8)
    assert (head == RED).all()


def test_hat_drawn_over_face(service):
    pixels = _skin_with_face(RED)
    fill(pixels, 40, 8, 8, 4, BLUE)  # upper half of the hat, rest transparent

    head = service.compose_head(pixels)

    assert (head[0:4] == BLUE).all()
    assert (head[4:8] == RED).all()


def test_white_kept_when_hat_uses_transparency(service):
    pixels = _skin_with_face(RED)
    fill(pixels, 40, 8, 8, 4, WHITE)

    head = service.compose_head(pixels)

    assert (head[0:4] == WHITE).all()
    assert (head[4:8] == RED).all()


def test_native_size_follows_skin_width(service):
    head = service.compose_head(_skin_with_face(RED, size=128))
    assert head.shape == (16, 16, 4)
    assert (head == RED).all()
