"""
Command Line Interface for PyNoiseFlow

This module provides command line utilities for PyNoiseFlow, rendering
images from noise fields without writing Python scripts.

Available Commands:
- flow: Flow tails and curved walks through a noise flow field (pnf-flow)
- tris: Triangle tessellation colored from a palette (pnf-tris)
- noise_debug: Preview of a noise generator (pnf-noise)
- featherweight: Pixel-level flow traces (pnf-featherweight)
- palette: Validate and print hex palettes (pnf-palette)
"""

_CLI_SUBMODULES = {
    "flow": (".flow_commands", "flow"),
    "tris": (".tris_commands", "tris"),
    "noise_debug": (".noise_commands", "noise_debug"),
    "featherweight": (".featherweight_commands", "featherweight"),
    "palette": (".palette_commands", "palette"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
