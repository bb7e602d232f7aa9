"""Camera module for view and ray generation.

This module provides the camera model for generating primary rays:

Components:
    thin_lens: Look-at camera with depth of field (pinhole when aperture=0)

Camera responsibilities:
    - Transform (s, t) image coordinates to world-space rays
    - Support look-at positioning with up vector
    - Compute the viewport from the vertical field of view
    - Jitter ray origins across the lens for defocus blur

Ray generation uses normalized image coordinates:
    s in [0, 1]: left to right across image
    t in [0, 1]: bottom to top across image
"""

from .thin_lens import (
    Camera,
    ThinLensCamera,
    get_camera_info,
    setup_camera,
)

__all__ = [
    "Camera",
    "ThinLensCamera",
    "setup_camera",
    "get_camera_info",
]
