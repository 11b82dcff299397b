"""
Configuration settings for the tesseract viewer.
"""

class TesseractConfig:
    """Configuration constants for tesseract geometry, projection and input handling."""

    # Geometry
    HALF_EDGE = 100.0

    # Perspective projection (viewer distances, same units as HALF_EDGE)
    VIEWER_DISTANCE_4D = 300.0
    VIEWER_DISTANCE_3D = 300.0
    DIVISOR_EPSILON = 1e-6

    # Sensor low-pass filter
    FILTER_ALPHA = 0.1

    # Drag handling
    DRAG_SENSITIVITY = 0.005  # radians per pixel
    VELOCITY_BLEND = 0.7  # weight of the newest velocity sample
    RELEASE_MOMENTUM_SCALE = 0.9

    # Inertia (timing in milliseconds)
    DECAY_RATE = 0.999
    STOP_THRESHOLD = 1e-4
    TICK_INTERVAL_MS = 16
    MIN_DELTA_TIME_MS = 1

    # Input mode
    GYROSCOPE_MODE_DEFAULT = True

    # Presentation
    WINDOW_WIDTH = 1080
    WINDOW_HEIGHT = 1080
    FPS = 60
    BACKGROUND_COLOR = (0, 0, 0)
    LINE_COLOR = (255, 255, 255)
    STROKE_WIDTH = 6
    HUD_COLOR = (128, 128, 128)

    def validate(self):
        """Raise ValueError if the constants cannot drive a stable rotation."""
        if self.VIEWER_DISTANCE_4D <= 0 or self.VIEWER_DISTANCE_3D <= 0:
            raise ValueError("Viewer distances must be positive")
        if not 0 < self.FILTER_ALPHA <= 1:
            raise ValueError(f"FILTER_ALPHA must be in (0, 1], got {self.FILTER_ALPHA}")
        if not 0 < self.DECAY_RATE < 1:
            raise ValueError(f"DECAY_RATE must be in (0, 1), got {self.DECAY_RATE}")
        if self.STOP_THRESHOLD <= 0:
            raise ValueError("STOP_THRESHOLD must be positive")
        if self.MIN_DELTA_TIME_MS <= 0 or self.TICK_INTERVAL_MS <= 0:
            raise ValueError("Timing constants must be positive")
        if self.DIVISOR_EPSILON <= 0:
            raise ValueError("DIVISOR_EPSILON must be positive")
        return self
