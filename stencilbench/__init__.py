"""Stencil, convolution and cellular-automaton benchmark kernels with dataset presets and timing helpers."""

__version__ = "0.1.0"