"""Service layer orchestrating dictionary reading, matching and ordering."""

from .unjumble_service import UnjumbleRequest, UnjumbleResult, run_unjumble

__all__ = ["UnjumbleRequest", "UnjumbleResult", "run_unjumble"]
