"""Server configuration: snake appearance and fallback move."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_MOVES = frozenset({"up", "down", "left", "right"})
_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class SnakeConfig:
    """Settings reported on GET / and used when answering moves.

    Supports JSON serialization so a deployment can ship its own file.
    """

    apiversion: str = "1"
    author: str = "author"
    color: str = "#ffffff"
    head: str = "default"
    tail: str = "default"
    version: str = "0.0.1"
    default_move: str = "right"

    def __post_init__(self) -> None:
        if self.default_move not in _MOVES:
            raise ValueError(
                f"Unsupported default_move: {self.default_move!r}. "
                f"Expected one of {sorted(_MOVES)}.",
            )
        if not _COLOR_RE.match(self.color):
            raise ValueError(
                f"color must look like '#rrggbb', got {self.color!r}.",
            )

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SnakeConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
