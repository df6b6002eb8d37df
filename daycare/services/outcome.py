from dataclasses import dataclass, field
from typing import List


@dataclass
class BestEffortOutcome:
    """
    Accumulates failures of steps that must never fail the enclosing operation
    (per-photo deletes during cleanup, push dispatch on signature requests).
    """

    succeeded: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)

    def success(self) -> None:
        self.succeeded += 1

    def skip(self) -> None:
        self.skipped += 1

    def fail(self, message: str) -> None:
        self.errors.append(message)

    @property
    def ok(self) -> bool:
        return not self.errors
