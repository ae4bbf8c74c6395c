"""Fixed-point parameters, axis points, ring queues, queue frames and arc stepping for machine controllers."""

__version__ = "0.1.0"
__all__ = [
    "arc",
    "frames",
    "lockedqueue",
    "mathutil",
    "param",
    "paramlist",
    "point",
    "ringqueue",
    "timeoutqueue",
    "xy",
]