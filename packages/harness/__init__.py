from .core import build_schedule, schedule_stats
from .io import write_csv, write_manifest

__all__ = ["build_schedule", "schedule_stats", "write_csv", "write_manifest"]
