"""
Configuration & Path Management
===============================
This module serves as the central registry for resource paths and chart constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps chart defaults (size, colors, stroke) in one place
   instead of scattering literals across the model and the view.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find bundled assets (sample issue lists) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_ISSUES_PATH (str): Absolute path to the bundled sample issue list.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/sunburstchart/
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_ISSUES_PATH: str = os.path.join(ASSETS_PATH, "sample_issues.json")

# Chart geometry
DEFAULT_WIDTH: int = 256
DEFAULT_HEIGHT: int = 256

# Chart styling
DEFAULT_COLOR: str = "#cccccc"
STROKE_COLOR: str = "#ffffff"
STROKE_WIDTH: float = 1.0
HOVER_OPACITY: float = 0.8
LABEL_COLOR: str = "#374151"

SEVERITY_COLORS: dict[str, str] = {
    "High": "#e11d48",
    "Medium": "#f59e0b",
    "Low": "#10b981",
}

# Numerical tolerance for angle comparisons (degrees)
ANGLE_EPS: float = 1e-9
