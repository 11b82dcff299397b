"""
Interactive tesseract window.

Mouse drags rotate the tesseract in drag mode; in gyroscope mode the
rotation follows an accelerometer read through evdev (``--devices``).
G or space toggles the mode.
"""

import argparse
import logging
from typing import Optional

import pygame

from .config.settings import TesseractConfig
from .core.controller import TesseractController
from .render.pygame_renderer import SegmentRenderer
from .utils.logger import TesseractLogger

logger = logging.getLogger(__name__)


class TesseractApp:
    """pygame front end: turns mouse and keyboard events into controller calls."""

    def __init__(self, config: Optional[TesseractConfig] = None,
                 gyroscope_mode: Optional[bool] = None,
                 use_devices: bool = False,
                 debug_file: Optional[str] = None) -> None:
        self.config = config or TesseractConfig()
        self.event_logger = TesseractLogger(debug_file)
        self.controller = TesseractController(self.config, event_logger=self.event_logger)
        if gyroscope_mode is not None:
            self.controller.set_gyroscope_mode(gyroscope_mode)

        self.use_devices = use_devices
        self.listener = None
        self.is_dragging = False

        pygame.init()
        self.screen = pygame.display.set_mode((self.config.WINDOW_WIDTH, self.config.WINDOW_HEIGHT))
        pygame.display.set_caption("Tesseract")
        self.renderer = SegmentRenderer(self.screen, self.config)

    def _start_devices(self) -> None:
        from .core.listener import InputListener

        self.listener = InputListener(self.controller, window_size=self.screen.get_size())
        if not self.listener.start():
            self.event_logger.log_sensor_unavailable()
            self.listener = None

    def run(self) -> None:
        """Run the event and render loop."""
        if self.use_devices:
            self._start_devices()
        elif self.controller.gyroscope_mode:
            logger.info("No --devices given, gyroscope mode will hold still; press G for drag mode")

        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        self.is_dragging = True
                        self.controller.on_gesture_start()
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_dragging:
                        dx, dy = event.rel
                        self.controller.on_gesture_move(dx, dy)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1 and self.is_dragging:
                        self.is_dragging = False
                        self.controller.on_gesture_end()
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_g, pygame.K_SPACE):
                        self.is_dragging = False
                        self.controller.toggle_mode()
                    elif event.key == pygame.K_ESCAPE:
                        return

            self.draw()
            clock.tick(self.config.FPS)

    def draw(self) -> None:
        """Render one frame."""
        width, height = self.screen.get_size()
        segments = self.controller.frame(width, height)
        self.renderer.render(segments, self.controller.gyroscope_mode, self.controller.current_angles())
        pygame.display.flip()

    def close(self) -> None:
        if self.listener:
            self.listener.stop()
        self.controller.shutdown()
        self.event_logger.close()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rotate a projected tesseract by drag or device orientation.")
    parser.add_argument("--drag", action="store_true", help="Start in drag mode instead of gyroscope mode")
    parser.add_argument("--devices", action="store_true",
                        help="Read touchscreen and accelerometer through evdev")
    parser.add_argument("--debug-log", metavar="PATH", help="Mirror input events into a debug file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Entry point for the viewer."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    app = TesseractApp(
        gyroscope_mode=False if args.drag else None,
        use_devices=args.devices,
        debug_file=args.debug_log
    )
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        app.close()
        pygame.quit()


if __name__ == "__main__":
    main()
