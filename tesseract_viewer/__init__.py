"""
Tesseract Viewer Package
Interactive 4D hypercube projection driven by orientation or drag input.
"""

from .core.controller import TesseractController
from .sources.sensor_source import SensorFilteredSource
from .sources.drag_source import DragInertiaSource

__version__ = "1.0.0"
__all__ = ["TesseractController", "SensorFilteredSource", "DragInertiaSource"]
