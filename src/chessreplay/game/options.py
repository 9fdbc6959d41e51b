"""Replay configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ReplayOptions:
    """Constraints applied while resolving and applying recorded plies.

    Args:
        check_king_safety: Reject candidates that leave the mover's king
            attacked.
        verify_check_markers: Log a warning when a ply's ``+``/``#`` marker
            disagrees with the board after the ply is applied.
        strict_captures: Require a candidate's capture flag to agree with
            the capture marker in the movetext.
    """

    check_king_safety: bool = True
    verify_check_markers: bool = False
    strict_captures: bool = False
