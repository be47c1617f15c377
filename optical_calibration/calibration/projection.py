"""Orthographic projection for surface pixel space."""

import numpy as np

from .models import Viewport

DEFAULT_NEAR = -1.0
DEFAULT_FAR = 1.0


def orthographic_projection(
    width: float, height: float, near: float = DEFAULT_NEAR, far: float = DEFAULT_FAR
) -> np.ndarray:
    """Create an orthographic projection for a pixel rectangle.

    Pixel ``(0, 0)`` maps to normalized device ``(-1, -1)`` and
    ``(width, height)`` to ``(1, 1)``. The result follows the column-vector
    convention (``ndc = P @ [x, y, z, 1]``).

    Args:
        width: Rectangle width in pixels
        height: Rectangle height in pixels
        near: Near clipping plane
        far: Far clipping plane

    A zero extent on an axis (or equal near and far planes) leaves that axis
    unscaled, so every viewport yields a finite matrix.

    Returns:
        4x4 float32 projection matrix
    """
    projection = np.identity(4, dtype=np.float32)

    if width != 0:
        projection[0, 0] = 2.0 / width
        projection[0, 3] = -1.0
    if height != 0:
        projection[1, 1] = 2.0 / height
        projection[1, 3] = -1.0
    if near != far:
        depth = far - near
        projection[2, 2] = -2.0 / depth
        projection[2, 3] = -(far + near) / depth

    return projection


class ProjectionMapper:
    """Projection for one surface viewport, computed once at construction."""

    def __init__(
        self,
        viewport: Viewport,
        near: float = DEFAULT_NEAR,
        far: float = DEFAULT_FAR,
    ):
        self.viewport = viewport
        self.matrix = orthographic_projection(
            viewport.width, viewport.height, near, far
        )
        self.matrix.setflags(write=False)

    def to_ndc(self, x: float, y: float) -> tuple[float, float]:
        """Map a pixel-space point to normalized device coordinates."""
        ndc = self.matrix @ np.array([x, y, 0.0, 1.0], dtype=np.float32)
        return float(ndc[0]), float(ndc[1])

    def __repr__(self) -> str:
        return f"ProjectionMapper(viewport={self.viewport})"
