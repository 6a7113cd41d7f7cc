import logging

import pytest

from moteur.utils import CustomVertex, debug_log, xrgb


def test_xrgb_pure_red():
    assert xrgb(255, 0, 0) == 0xFFFF0000


def test_xrgb_channels_round_trip():
    colour = xrgb(12, 34, 56)
    assert (colour >> 16) & 0xFF == 12
    assert (colour >> 8) & 0xFF == 34
    assert colour & 0xFF == 56
    assert colour >> 24 == 0xFF


def test_xrgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        xrgb(256, 0, 0)


def test_debug_log_string(caplog):
    with caplog.at_level(logging.DEBUG, logger="moteur"):
        assert debug_log("frame") == "frame\n"
    assert "frame" in caplog.text


def test_debug_log_int():
    assert debug_log(42) == "42\n"


def test_debug_log_rejects_other_types():
    with pytest.raises(TypeError):
        debug_log(1.5)


def test_custom_vertex_fields():
    vertex = CustomVertex(-2.5, -3.0, 0.0, xrgb(0, 0, 255))
    assert (vertex.x, vertex.y, vertex.z) == (-2.5, -3.0, 0.0)
    assert vertex.color & 0xFF == 255