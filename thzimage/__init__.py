"""Pixel types, colour-space conversion, a test image generator, convolution transformers and image series writing."""

__version__ = "1.0.0"

__all__ = ["colorspace", "pixel", "generator", "convolution", "image_series"]