"""
Physics - 2D vector math for the simulation.

Provides:
- Vector arithmetic (add, scale, dot, distance)
- Rotation and normalization
- Toroidal wrapping of positions
- Arena-to-display coordinate transform
- Arena dimensions
"""

from dataclasses import dataclass
import numpy as np


def vec(x: float = 0.0, y: float = 0.0) -> np.ndarray:
    """Create a 2D vector.
    
    Args:
        x: X component
        y: Y component
    
    Returns:
        Float array [x, y]
    """
    return np.array([x, y], dtype=float)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Component-wise sum of two vectors."""
    return a + b


def scale(v: np.ndarray, factor: float) -> np.ndarray:
    """Multiply a vector by a scalar."""
    return v * factor


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two 2D vectors."""
    return float(a[0] * b[0] + a[1] * b[1])


def length(v: np.ndarray) -> float:
    """Euclidean length of a vector."""
    return float(np.hypot(v[0], v[1]))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))


def integrate(position: np.ndarray, velocity: np.ndarray, dt: float) -> np.ndarray:
    """Integrate position from velocity.
    
    Args:
        position: Current position [x, y]
        velocity: Velocity [vx, vy] per second
        dt: Time step
    
    Returns:
        New position
    """
    return add(position, scale(velocity, dt))


def normalize(v: np.ndarray) -> np.ndarray:
    """Scale a vector to unit length.
    
    Callers must not pass a zero vector. Every direction in the
    simulation is built so this cannot happen.
    
    Args:
        v: Non-zero vector
    
    Returns:
        Unit vector with the same direction
    """
    norm = length(v)
    assert norm > 0.0, "cannot normalize a zero vector"
    return v / norm


def rotate(v: np.ndarray, angle: float) -> np.ndarray:
    """Rotate vector(s) counter-clockwise by angle.
    
    Accepts a single vector of shape (2,) or an array of points
    of shape (n, 2).
    
    Args:
        v: Vector or points to rotate
        angle: Rotation angle in radians
    
    Returns:
        Rotated vector(s)
    """
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    rotation = np.array([
        [cos_a, -sin_a],
        [sin_a, cos_a],
    ])
    return np.asarray(v, dtype=float) @ rotation.T


def heading_vector(angle: float) -> np.ndarray:
    """Unit facing vector for an angle (0 = +Y, counter-clockwise)."""
    return rotate(vec(0.0, 1.0), angle)


def is_out_of_bounds(position: np.ndarray, half_width: float, half_height: float) -> bool:
    """Check whether a point lies outside the visible arena.
    
    Args:
        position: Arena-centered position
        half_width: Half of arena width
        half_height: Half of arena height
    
    Returns:
        True if outside on either axis
    """
    return bool(abs(position[0]) > half_width or abs(position[1]) > half_height)


def wrap_position(position: np.ndarray, width: float, height: float) -> np.ndarray:
    """Apply toroidal wrap to a position.
    
    Each axis is corrected independently by one full extent when the
    position passes half of that extent.
    
    Args:
        position: Arena-centered position
        width: Full arena width
        height: Full arena height
    
    Returns:
        Wrapped position (new array)
    """
    wrapped = np.array(position, dtype=float)
    for axis, extent in enumerate((width, height)):
        half = extent / 2
        if wrapped[axis] > half:
            wrapped[axis] -= extent
        elif wrapped[axis] < -half:
            wrapped[axis] += extent
    return wrapped


def to_draw_space(points: np.ndarray, width: float, height: float) -> np.ndarray:
    """Convert arena coordinates to display coordinates.
    
    Arena space has its origin at the center with Y up; display space
    has its origin at the top-left with Y down. Only the render
    boundary uses this - simulation state is never converted.
    
    Args:
        points: Point (2,) or points (n, 2) in arena space
        width: Display width
        height: Display height
    
    Returns:
        Point(s) in display space
    """
    pts = np.array(points, dtype=float)
    pts[..., 0] = pts[..., 0] + width / 2
    pts[..., 1] = height / 2 - pts[..., 1]
    return pts


@dataclass
class ArenaConfig:
    """Arena dimensions (arena units, centered on the origin)."""
    width: float = 640.0
    height: float = 480.0
    
    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Arena must have positive size, got {self.width}x{self.height}"
            )
    
    @property
    def half_width(self) -> float:
        return self.width / 2
    
    @property
    def half_height(self) -> float:
        return self.height / 2
    
    def contains(self, position: np.ndarray) -> bool:
        """Check whether a point is inside the visible arena."""
        return not is_out_of_bounds(position, self.half_width, self.half_height)
