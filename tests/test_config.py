import math

from conjure_visualizer.layout import LayoutConfig, get_layout_config, set_layout_config
from conjure_visualizer.layout.config import GOLDEN_RATIO, PENTAGRAM_RATIO


def test_pentagram_ratio_is_golden_ratio_squared():
    assert math.isclose(PENTAGRAM_RATIO, GOLDEN_RATIO ** 2)
    assert math.isclose(PENTAGRAM_RATIO, GOLDEN_RATIO + 1.0)


def test_config_accessors_copy():
    original = get_layout_config()
    try:
        config = get_layout_config()
        config.content_scale = 0.5
        assert get_layout_config().content_scale == original.content_scale

        set_layout_config(config)
        config.content_scale = 0.1
        assert get_layout_config().content_scale == 0.5
    finally:
        set_layout_config(original)


def test_derived_values():
    config = LayoutConfig(base_size=10.0, symbol_font_size=2.0, phrase_font_size=0.5)
    assert config.symbol_size == 20.0
    assert config.phrase_size == 5.0
    assert config.ring_ratio(False) == 1.0
    assert config.ring_ratio(True) == config.double_ring_ratio
    assert config.stroke_ratio("chain") == config.chain_stroke_ratio
    assert config.stroke_ratio("line") == config.line_stroke_ratio
    assert math.isclose(config.pentagram_outer_rotation - config.pentagram_inner_rotation, math.pi / 2)
    assert config.decoration("hat") == (0.5, 0.2, math.pi / 2)
