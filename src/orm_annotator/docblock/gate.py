"""Decide whether a rewritten file is worth writing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeDecision:
    changed: bool
    content: str | None = None


def decide(original: str, candidate: str | None) -> ChangeDecision:
    """Compare candidate text against the original, character for character.

    No whitespace normalization: any difference counts as a change.
    """
    if candidate is None or candidate == original:
        return ChangeDecision(changed=False)
    return ChangeDecision(changed=True, content=candidate)
