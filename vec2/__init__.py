from __future__ import annotations

from .vector import (
    Vector2,
    VectorLike,
    Polar,
)
from .config import Config
