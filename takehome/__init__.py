"""Take-home pay and 401(k) contribution planner."""

__version__ = "0.1.0"
