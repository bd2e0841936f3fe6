"""DuctSketch — duct/pipe shape geometry and sketching."""

__version__ = "0.1.0"
