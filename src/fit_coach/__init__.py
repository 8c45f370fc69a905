"""FitCoach - deterministic two-week training plan generation."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("fit-coach")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
