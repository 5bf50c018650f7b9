"""Generator configuration dataclasses — all frozen and slotted for immutability."""

from dataclasses import dataclass, field

# Largest throw height the single-character notation can represent ('z').
MAX_ENCODABLE_HEIGHT = 35


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """State graph parameters."""

    balls: int = 3
    max_height: int = 5  # highest throw allowed, also the state bit width


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Inclusive range of pattern periods to enumerate."""

    period_from: int = 1
    period_to: int = 3


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Top-level generator configuration composing all sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.graph.balls < 1:
            raise ValueError(f"balls must be >= 1, got {self.graph.balls}")
        if self.graph.max_height < 1:
            raise ValueError(
                f"max_height must be >= 1, got {self.graph.max_height}"
            )
        if self.graph.balls > self.graph.max_height:
            raise ValueError(
                f"balls ({self.graph.balls}) must be "
                f"<= max_height ({self.graph.max_height})"
            )
        if self.graph.max_height > MAX_ENCODABLE_HEIGHT:
            raise ValueError(
                f"max_height ({self.graph.max_height}) must be "
                f"<= {MAX_ENCODABLE_HEIGHT} to be printable"
            )
        if self.search.period_from < 1:
            raise ValueError(
                f"period_from must be >= 1, got {self.search.period_from}"
            )
        if self.search.period_from > self.search.period_to:
            raise ValueError(
                f"period_from ({self.search.period_from}) must be "
                f"<= period_to ({self.search.period_to})"
            )
