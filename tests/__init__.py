"""
Test suite for PyNoiseFlow package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for noise fields, palettes, integrators, tessellation and canvas
- CLI tests through click's CliRunner
- Integration tests rendering complete images

Run with: pytest
"""
