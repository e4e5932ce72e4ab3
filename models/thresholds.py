from dataclasses import dataclass


@dataclass(frozen=True)
class Thresholds:
    """
    Data-driven cutoffs for one pipeline run.

      • high     contrast needed to seed the kept set
      • low      contrast needed to be a propagation candidate (low <= high)
      • connect  endpoints closer than this are treated as touching
    """

    high: float
    low: float
    connect: float

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"low threshold {self.low} exceeds high threshold {self.high}")
        if self.connect < 0:
            raise ValueError(f"connect distance must be non-negative, got {self.connect}")
