"""Building blocks for a small educational ray tracer."""

__version__ = "0.1.0"

__all__ = [
    "arcball",
    "bbox",
    "color",
    "dpdf",
    "frame",
    "object",
    "proplist",
    "rfilter",
    "vector",
]