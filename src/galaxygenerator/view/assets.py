"""
Asset Loading
Loads the appearance-only assets. A missing file degrades the look of the
scene but never stops generation.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

import pyvista as pv

from galaxygenerator.config import ENVIRONMENT_MAP_PATH

logger = logging.getLogger(__name__)


def load_texture(path: str) -> Optional[pv.Texture]:
    """Read an image file into a texture. Returns None if it is missing or unreadable."""
    if not os.path.exists(path):
        logger.warning(f"Texture not found: {path}")
        return None
    try:
        texture = pv.read_texture(path)
    except Exception as e:
        logger.warning(f"Failed to load texture from {path}: {e}")
        return None
    logger.info(f"Loaded texture: {path}")
    return texture


def load_environment_map(path: str = ENVIRONMENT_MAP_PATH) -> Optional[pv.Texture]:
    """Equirectangular HDR used for the background and image based lighting."""
    texture = load_texture(path)
    if texture is not None:
        texture.mipmap = True
        texture.interpolate = True
    return texture
