"""Services wrapping the triage engine."""

from .triage import TriageService

__all__ = ["TriageService"]
