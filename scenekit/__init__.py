"""Scene runtime, asset loading and pygfx rendering boundary modules."""

__version__ = "0.1.0"

__all__ = ["__version__"]
