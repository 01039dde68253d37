"""
Configuration & Path Management
===============================
Central registry for asset paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Texture paths are resolved in one place instead of being
   hardcoded in the widgets that load them.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets when the app is frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    ENVIRONMENT_MAP_PATH (str): Equirectangular HDR used as scene background.
"""
import sys
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/galaxygenerator/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
TEXTURES_PATH: str = os.path.join(ASSETS_PATH, "textures")
ENVIRONMENT_MAP_PATH: str = os.path.join(TEXTURES_PATH, "environmentMaps", "2k.hdr")

# Render loop
FRAME_INTERVAL_MS: int = 16
ROTATION_SPEED: float = 0.06  # rad/s, around the vertical axis

# Camera
CAMERA_POSITION: tuple[float, float, float] = (3.0, 5.0, 6.0)
CAMERA_VIEW_ANGLE: float = 75.0
CAMERA_CLIPPING_RANGE: tuple[float, float] = (0.1, 100.0)

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
