"""Marker rendering for the calibration tool.

Draws the calibration marker as an outline in surface pixel space using
ModernGL. The caller selects the viewport and projection of the surface
being drawn before each marker.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import moderngl
import numpy as np

from ..calibration.models import Number, Viewport
from ..config import MarkerConfig, MarkerShape
from ..errors import RendererError

logger = logging.getLogger(__name__)

IDENTITY = np.identity(4, dtype=np.float32)

VERTEX_SHADER = """
#version 330 core
in vec2 in_position;
uniform mat4 u_projection;
uniform mat4 u_model;

void main() {
    gl_Position = u_projection * u_model * vec4(in_position, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330 core
uniform vec4 u_color;
out vec4 fragColor;

void main() {
    fragColor = u_color;
}
"""


@dataclass
class RenderStats:
    """Rendering statistics."""

    markers_drawn: int = 0
    draw_calls: int = 0


def _matrix_bytes(matrix: np.ndarray) -> bytes:
    # GLSL matrices are column-major.
    return np.ascontiguousarray(matrix.T, dtype=np.float32).tobytes()


def circle_outline(
    center: tuple[Number, Number], radius: Number, segments: int
) -> np.ndarray:
    """Vertices of a closed circle outline, suitable for a line loop."""
    angles = np.linspace(0.0, 2.0 * math.pi, segments, endpoint=False)
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return np.column_stack((xs, ys)).astype(np.float32)


def square_outline(center: tuple[Number, Number], radius: Number) -> np.ndarray:
    """Vertices of a square outline with half-extent ``radius``."""
    x, y = center
    return np.array(
        [
            [x - radius, y - radius],  # Bottom-left
            [x + radius, y - radius],  # Bottom-right
            [x + radius, y + radius],  # Top-right
            [x - radius, y + radius],  # Top-left
        ],
        dtype=np.float32,
    )


class MarkerRenderer:
    """Draws the calibration marker into the current viewport."""

    def __init__(
        self, gl_context: moderngl.Context, config: Optional[MarkerConfig] = None
    ):
        """Initialize the renderer.

        Args:
            gl_context: ModernGL context for rendering
            config: Marker appearance, uses defaults if None
        """
        self.ctx = gl_context
        self.config = config or MarkerConfig()
        self.stats = RenderStats()

        self._program: Optional[moderngl.Program] = None
        self._vbo: Optional[moderngl.Buffer] = None
        self._vao: Optional[moderngl.VertexArray] = None
        self._capacity = 0

        self._initialize_program()
        logger.info(f"MarkerRenderer initialized ({self.config.shape.value} marker)")

    def _initialize_program(self) -> None:
        try:
            self._program = self.ctx.program(
                vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER
            )
            self._program["u_color"].value = tuple(self.config.color)
            self._program["u_projection"].write(_matrix_bytes(IDENTITY))
            self._program["u_model"].write(_matrix_bytes(IDENTITY))
        except Exception as e:
            logger.error(f"Shader initialization failed: {e}")
            raise RendererError(f"Shader setup failed: {e}") from e

    def _upload(self, vertices: np.ndarray) -> None:
        data = vertices.tobytes()
        if self._vbo is None or len(data) > self._capacity:
            if self._vao is not None:
                self._vao.release()
            if self._vbo is not None:
                self._vbo.release()
            self._vbo = self.ctx.buffer(reserve=len(data), dynamic=True)
            self._vao = self.ctx.vertex_array(
                self._program, [(self._vbo, "2f", "in_position")]
            )
            self._capacity = len(data)
        self._vbo.write(data)

    def set_viewport(self, viewport: Viewport) -> None:
        """Restrict rendering to a surface's pixel rectangle."""
        self.ctx.viewport = viewport.to_tuple()

    def set_projection(self, matrix: np.ndarray) -> None:
        """Install a 4x4 projection matrix (column-vector convention)."""
        if matrix.shape != (4, 4):
            raise ValueError("Projection must be a 4x4 matrix")
        self._program["u_projection"].write(_matrix_bytes(matrix))

    def reset_model(self) -> None:
        """Reset the model transform to identity."""
        self._program["u_model"].write(_matrix_bytes(IDENTITY))

    def draw_marker(self, center: tuple[Number, Number], radius: Number) -> None:
        """Draw the marker outline centered at ``center``.

        Zero and negative radii are drawn as given.
        """
        if self.config.shape == MarkerShape.RECTANGLE:
            vertices = square_outline(center, radius)
        else:
            vertices = circle_outline(center, radius, self.config.circle_segments)

        self._upload(vertices)
        self.ctx.line_width = self.config.line_width
        self._vao.render(moderngl.LINE_LOOP, vertices=len(vertices))

        self.stats.markers_drawn += 1
        self.stats.draw_calls += 1

    def release(self) -> None:
        """Release GL resources."""
        for resource in (self._vao, self._vbo, self._program):
            if resource is not None:
                resource.release()
        self._vao = None
        self._vbo = None
        self._program = None

    def __repr__(self) -> str:
        return (
            f"MarkerRenderer(shape={self.config.shape.value}, "
            f"markers={self.stats.markers_drawn})"
        )
