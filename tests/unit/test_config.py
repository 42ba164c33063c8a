"""Unit tests for render configuration validation."""

import dataclasses

import pytest

from pynoiseflow import constants as cte
from pynoiseflow.config import (
    CanvasConfig,
    FeatherweightConfig,
    FlowConfig,
    NoiseImageConfig,
    TrisConfig,
)


@pytest.mark.unit
def test_defaults_come_from_constants():
    config = FlowConfig()
    assert config.canvas.bounds == (cte.WIDTH, cte.HEIGHT)
    assert config.scale == cte.FLOW_SCALE
    assert config.bias == (cte.FLOW_BIAS_X, cte.FLOW_BIAS_Y)
    assert config.draw_walks and not config.draw_tails


@pytest.mark.unit
def test_configs_are_frozen():
    config = TrisConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.side = 10.0


@pytest.mark.unit
@pytest.mark.parametrize("factory", [
    lambda: CanvasConfig(width=0),
    lambda: FlowConfig(noise="worley"),
    lambda: FlowConfig(scale=0.0),
    lambda: FlowConfig(n_walks=-1),
    lambda: FlowConfig(bias=(0.1,)),
    lambda: FlowConfig(gradient=()),
    lambda: TrisConfig(side=-2.0),
    lambda: TrisConfig(color_mode="rainbow"),
    lambda: NoiseImageConfig(scale=0.0),
    lambda: FeatherweightConfig(size=0),
    lambda: FeatherweightConfig(tail_freq=0),
])
def test_invalid_values_rejected(factory):
    with pytest.raises(ValueError):
        factory()


@pytest.mark.unit
def test_step_size_zero_allowed():
    assert FlowConfig(step_size=0.0).step_size == 0.0


@pytest.mark.unit
def test_noise_image_field_scale():
    canvas = CanvasConfig(400, 200)
    assert NoiseImageConfig(canvas=canvas, scale=50.0).field_scale == 50.0
    assert NoiseImageConfig(canvas=canvas, scale=4.0, relative=True).field_scale == 100.0


@pytest.mark.unit
def test_featherweight_derived_values():
    config = FeatherweightConfig(size=1000, scale=10.0, tail_freq=20)
    assert config.pos_scale == 100.0
    assert config.tail_stride == 50
    assert FeatherweightConfig(size=10, tail_freq=20).tail_stride == 1
