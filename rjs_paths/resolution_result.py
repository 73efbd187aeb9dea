"""Data model for the outcome of resolving one dependency."""

from dataclasses import dataclass, field


@dataclass
class ResolutionResult:
    """Module name to relative path entries for a single dependency."""

    paths: dict[str, str] = field(default_factory=dict)
