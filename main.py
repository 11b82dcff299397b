#!/usr/bin/env python3
"""
Tesseract Viewer - Main Entry Point
Interactive 4D hypercube projection driven by orientation or drag input.
"""

from tesseract_viewer.app import main

if __name__ == "__main__":
    main()
