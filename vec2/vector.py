from __future__ import annotations

import dataclasses
import logging
import math
import typing


__all__ = [
    "Vector2",
    "VectorLike",
    "Polar",
]

_logger = logging.getLogger("Vector2")


@typing.runtime_checkable
class VectorLike(typing.Protocol):
    x: float
    y: float


Operand = typing.Union[VectorLike, typing.Sequence[float]]


def _xy(other: Operand) -> tuple[float, float]:
    """Return the components of anything with x and y attributes, or of an (x, y) pair."""
    try:
        return other.x, other.y
    except AttributeError:
        x, y = other
        return x, y


@dataclasses.dataclass(frozen=True)
class Polar:
    """Polar form of a vector: radius and counter-clockwise angle from the positive x-axis in radians."""
    r: float
    theta: float

    def to_vector(self) -> Vector2:
        return Vector2.from_polar(self.theta, self.r)


class Vector2:
    """A mutable 2D vector.

    Mutating methods work in place and return the instance, so calls can be chained:
    ``Vector2(3, 4).normalize().scale(2)``. The operators ``+``, ``-``, ``*`` and ``/``
    return new vectors instead.

    The two slots are also used to hold polar coordinates after :meth:`to_polar`, in which
    case ``r`` and ``theta`` name ``x`` and ``y``. Which form is stored is up to the caller.
    """
    __slots__ = ("x", "y")

    ORIGIN: typing.ClassVar[Vector2]
    RIGHT: typing.ClassVar[Vector2]
    LEFT: typing.ClassVar[Vector2]
    TOP: typing.ClassVar[Vector2]
    DOWN: typing.ClassVar[Vector2]

    def __init__(self, x: float = 0, y: float = 0):
        self.x = x
        self.y = y

    @staticmethod
    def from_polar(angle: float, radius: float = 1) -> Vector2:
        return Vector2(math.cos(angle) * radius, math.sin(angle) * radius)

    # basic mutation

    def set(self, x: float, y: float) -> Vector2:
        self.x = x
        self.y = y
        return self

    def translate(self, dx: float = 0, dy: float = 0) -> Vector2:
        self.x += dx
        self.y += dy
        return self

    def copy(self, other: Operand) -> Vector2:
        """Overwrite this vector with the components of `other`."""
        return self.set(*_xy(other))

    def clone(self) -> Vector2:
        return Vector2(self.x, self.y)

    # arithmetic

    def add(self, other: Operand) -> Vector2:
        x, y = _xy(other)
        return self.translate(x, y)

    def sub(self, other: Operand) -> Vector2:
        x, y = _xy(other)
        return self.translate(-x, -y)

    def hadamard(self, other: Operand) -> Vector2:
        x, y = _xy(other)
        return self.set(self.x * x, self.y * y)

    def scale(self, factor: float) -> Vector2:
        return self.set(self.x * factor, self.y * factor)

    # magnitude

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        return math.sqrt(self.mag_sq())

    def normalize(self) -> Vector2:
        """Scale to unit length. The zero vector is left unchanged."""
        m = self.mag()
        if m == 0:
            _logger.debug("Normalizing a zero vector, leaving it unchanged.")
            return self

        return self.scale(1 / m)

    def set_mag(self, mag: float) -> Vector2:
        return self.normalize().scale(mag)

    def norm(self, p: float = 2) -> float:
        """Return the p-norm ``(|x|^p + |y|^p)^(1/p)``. ``p=math.inf`` gives the maximum norm."""
        if p <= 0:
            raise ValueError(f"Norm degree must be positive, got {p!r}.")

        if math.isinf(p):
            return max(abs(self.x), abs(self.y))

        # scale by the largest component so the powers stay within float range
        m = max(abs(self.x), abs(self.y))
        if m == 0:
            return 0.0

        return m * ((abs(self.x) / m) ** p + (abs(self.y) / m) ** p) ** (1 / p)

    # products

    def dot(self, other: Operand) -> float:
        x, y = _xy(other)
        return self.x * x + self.y * y

    def cross(self, other: Operand) -> float:
        """Scalar cross product. Positive if `other` lies counter-clockwise of this vector."""
        x, y = _xy(other)
        return self.x * y - x * self.y

    # direction

    def set_direction(self, direction: Operand) -> Vector2:
        """Point along `direction`, with the dot product of this vector and `direction` as the new length.

        For a unit `direction` this is the projection of this vector onto it.
        """
        mag = self.dot(direction)
        return self.copy(direction).set_mag(mag)

    def lerp(self, other: Operand, t: float) -> Vector2:
        """Move towards `other` by the fraction `t`. Values of `t` outside [0, 1] extrapolate."""
        x, y = _xy(other)
        return self.set(self.x + (x - self.x) * t, self.y + (y - self.y) * t)

    def rotate_around(self, angle: float, origin: Operand | None = None) -> Vector2:
        """Rotate counter-clockwise by `angle` radians around `origin` (default: the origin)."""
        ox, oy = _xy(Vector2.ORIGIN if origin is None else origin)

        sin, cos = math.sin(angle), math.cos(angle)
        tx, ty = self.x - ox, self.y - oy

        return self.set(tx * cos - ty * sin + ox, tx * sin + ty * cos + oy)

    # polar coordinates

    def to_polar(self) -> Vector2:
        """Replace (x, y) with (r, theta) in place."""
        return self.set(self.mag(), math.atan2(self.y, self.x))

    def to_cartesian(self) -> Vector2:
        """Interpret (x, y) as (r, theta) and replace it with the Cartesian form in place."""
        r, theta = self.x, self.y
        return self.set(r * math.cos(theta), r * math.sin(theta))

    def polar(self) -> Polar:
        return Polar(self.mag(), math.atan2(self.y, self.x))

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value: float):
        self.x = value

    @property
    def theta(self) -> float:
        return self.y

    @theta.setter
    def theta(self, value: float):
        self.y = value

    # angles

    @staticmethod
    def angle(v1: Operand, v2: Operand) -> float:
        """Return the unsigned angle between two vectors in [0, pi], or NaN if either has zero length."""
        x1, y1 = _xy(v1)
        x2, y2 = _xy(v2)

        denominator = math.sqrt((x1 * x1 + y1 * y1) * (x2 * x2 + y2 * y2))
        if denominator == 0:
            _logger.debug(f"Angle with a zero vector is undefined: {v1!r}, {v2!r}.")
            return math.nan

        cos = (x1 * x2 + y1 * y2) / denominator
        return math.acos(min(1.0, max(-1.0, cos)))

    @staticmethod
    def angle2(v1: Operand, v2: Operand) -> float:
        """Return the counter-clockwise angle from `v1` to `v2` in [0, 2*pi)."""
        a = Vector2.angle(v1, v2)

        x1, y1 = _xy(v1)
        x2, y2 = _xy(v2)
        if x1 * y2 - x2 * y1 < 0:
            return 2 * math.pi - a

        return a

    # python protocols

    def is_close(self, other: Operand, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        x, y = _xy(other)
        return (math.isclose(self.x, x, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.y, y, rel_tol=rel_tol, abs_tol=abs_tol))

    def map(self, func: typing.Callable[[float], float]) -> Vector2:
        return Vector2(func(self.x), func(self.y))

    def __iter__(self):
        return iter((self.x, self.y))

    def __len__(self):
        return 2

    def __getitem__(self, i: int):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y

        raise IndexError(f"Vector2 index out of range: {i!r}")

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented

        return self.x == other.x and self.y == other.y

    __hash__ = None

    def __add__(self, other: Vector2):
        if not isinstance(other, Vector2):
            return NotImplemented

        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2):
        if not isinstance(other, Vector2):
            return NotImplemented

        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float):
        if isinstance(factor, Vector2):
            return NotImplemented
        else:
            return Vector2(self.x * factor, self.y * factor)

    def __rmul__(self, factor: float):
        return self * factor

    def __truediv__(self, divisor: float):
        if isinstance(divisor, Vector2):
            return NotImplemented
        else:
            return Vector2(self.x / divisor, self.y / divisor)

    def __iadd__(self, other: Vector2):
        if not isinstance(other, Vector2):
            return NotImplemented

        return self.add(other)

    def __isub__(self, other: Vector2):
        if not isinstance(other, Vector2):
            return NotImplemented

        return self.sub(other)

    def __imul__(self, factor: float):
        if isinstance(factor, Vector2):
            return NotImplemented

        return self.scale(factor)

    def __itruediv__(self, divisor: float):
        if isinstance(divisor, Vector2):
            return NotImplemented

        return self.scale(1 / divisor)

    def __neg__(self):
        return -1 * self

    def __bool__(self):
        return self.x != 0 or self.y != 0

    def __repr__(self):
        return f"Vector2({self.x}, {self.y})"

    def __format__(self, format_spec):
        return f"Vector2({self.x:{format_spec}}, {self.y:{format_spec}})"


class _ConstantVector2(Vector2):
    """A Vector2 that refuses every mutation. Used for the shared constants."""
    __slots__ = ()

    def __init__(self, x: float = 0, y: float = 0):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self!r} is a constant and cannot be modified. Use clone() to get a mutable copy.")

    def __delattr__(self, name):
        raise AttributeError(f"{self!r} is a constant and cannot be modified.")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Vector2.ORIGIN = _ConstantVector2(0, 0)
Vector2.RIGHT = _ConstantVector2(1, 0)
Vector2.LEFT = _ConstantVector2(-1, 0)
Vector2.TOP = _ConstantVector2(0, 1)
Vector2.DOWN = _ConstantVector2(0, -1)
