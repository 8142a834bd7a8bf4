"""Configuration dataclasses for sorting benchmarks."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from lapbench.data.fixtures import FIXTURE_KINDS


@dataclass
class BenchmarkConfig:
    """Full benchmark configuration."""

    algorithm: str = "insertion"
    size: int = 2000
    runs: int = 20
    seed: int = 42
    # Run sizes size * 2**k for k in range(doublings).
    doublings: int = 1
    fixtures: List[str] = field(default_factory=lambda: list(FIXTURE_KINDS))
    instrument: bool = False
    save_dir: Optional[str] = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.runs < 1:
            raise ValueError(f"runs must be positive, got {self.runs}")
        if self.doublings < 1:
            raise ValueError(f"doublings must be positive, got {self.doublings}")
        unknown = [kind for kind in self.fixtures if kind not in FIXTURE_KINDS]
        if unknown:
            raise ValueError(
                f"Unknown fixture kind(s) {unknown}; expected some of {list(FIXTURE_KINDS)}."
            )
        # Repeated kinds would time the same fixture twice.
        self.fixtures = list(dict.fromkeys(self.fixtures))

    @property
    def sizes(self) -> List[int]:
        return [self.size * 2**k for k in range(self.doublings)]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the config to a plain dict."""
        return asdict(self)
