"""Tests for tone mapping and PNG export."""

import numpy as np
import pytest

from spheretrace.renderer.export import load_png, save_png
from spheretrace.renderer.tone_mapping import gamma_correct, luminance, to_8bit


class TestToneMapping:
    """Tests for gamma correction and quantization."""

    def test_gamma_two_is_square_root(self):
        out = gamma_correct(np.array([0.0, 0.25, 1.0]))
        assert np.allclose(out, [0.0, 0.5, 1.0])

    def test_negative_values_clamped(self):
        assert gamma_correct(np.array([-0.5]))[0] == 0.0

    def test_other_gamma(self):
        assert gamma_correct(np.array([0.5]), gamma=2.2)[0] == pytest.approx(0.5 ** (1 / 2.2))

    def test_to_8bit(self):
        out = to_8bit(np.array([0.0, 0.5, 1.0, 1.7, -0.2]))
        assert out.dtype == np.uint8
        assert out.tolist() == [0, 128, 255, 255, 0]

    def test_luminance(self):
        image = np.array([[[1.0, 1.0, 1.0], [0.0, 0.0, 0.0]]])
        assert np.allclose(luminance(image), [[1.0, 0.0]])


class TestExport:
    """Tests for save_png and load_png."""

    def test_save_and_load(self, tmp_path):
        image = np.zeros((4, 6, 3))
        image[0, 0] = (1.0, 0.0, 0.0)
        image[3, 5] = (0.0, 0.5, 1.0)
        path = save_png(image, tmp_path / "out.png")
        assert path.exists()

        pixels = load_png(path)
        assert pixels.shape == (4, 6, 3)
        assert pixels[0, 0].tolist() == [255, 0, 0]
        assert pixels[3, 5].tolist() == [0, 128, 255]
        assert pixels[1, 1].tolist() == [0, 0, 0]

    def test_creates_parent_directories(self, tmp_path):
        path = save_png(np.ones((2, 2, 3)), tmp_path / "a" / "b" / "out.png")
        assert path.exists()

    @pytest.mark.parametrize("shape", [(4, 4), (4, 4, 4), (4,)])
    def test_rejects_bad_shape(self, tmp_path, shape):
        with pytest.raises(ValueError):
            save_png(np.zeros(shape), tmp_path / "out.png")
