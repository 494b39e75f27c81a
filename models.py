"""
models.py - Core Data Models for Advertisement Placement
=========================================================
Defines the requests, the candidate rectangles and the run result.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Any


# Side length of the square map; valid coordinates are 0..MAP_SIZE-1.
MAP_SIZE = 10000


@dataclass(frozen=True)
class Request:
    """A point on the map and the rectangle area wanted around it."""
    row: int
    col: int
    area: int

    @property
    def point(self) -> Tuple[int, int]:
        """Requested point as (row, col)."""
        return (self.row, self.col)


@dataclass
class Advertisement:
    """Half-open box [row0, row1) x [col0, col1) answering one request."""
    row0: int
    col0: int
    row1: int
    col1: int

    @classmethod
    def seed_for(cls, request: Request) -> 'Advertisement':
        """Minimal 1x1 box anchored at the request's point."""
        return cls(request.row, request.col, request.row + 1, request.col + 1)

    @property
    def width(self) -> int:
        """Extent along rows."""
        return self.row1 - self.row0

    @property
    def height(self) -> int:
        """Extent along columns."""
        return self.col1 - self.col0

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, row: int, col: int) -> bool:
        """Check if the cell (row, col) lies inside the box."""
        return self.row0 <= row < self.row1 and self.col0 <= col < self.col1

    def intersects(self, other: 'Advertisement') -> bool:
        """Check for interior overlap; shared edges and corners do not count."""
        return (max(self.row0, other.row0) < min(self.row1, other.row1) and
                max(self.col0, other.col0) < min(self.col1, other.col1))

    def is_well_formed(self) -> bool:
        return self.row0 < self.row1 and self.col0 < self.col1

    def is_within_map(self, map_size: int = MAP_SIZE) -> bool:
        """Every coordinate, exclusive bounds included, must be below map_size."""
        return all(0 <= v < map_size for v in self.to_tuple())

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.row0, self.col0, self.row1, self.col1)

    def copy(self) -> 'Advertisement':
        return Advertisement(*self.to_tuple())

    def __str__(self) -> str:
        return f"{self.row0} {self.col0} {self.row1} {self.col1}"


@dataclass
class AnnealingResult:
    """Results from one annealing run."""
    advertisements: List[Advertisement]
    iterations: int
    accepted_moves: int
    final_temperature: float
    elapsed_time: float
    score: int
    seed: int
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.advertisements)

    def get_summary(self) -> str:
        """Generate text summary of results."""
        lines = [
            f"Requests: {self.count}",
            f"Iterations: {self.iterations}",
            f"Accepted moves: {self.accepted_moves}",
            f"Final temperature: {self.final_temperature:.3e}",
            f"Time: {self.elapsed_time:.2f} seconds",
            f"Score: {self.score}",
        ]
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            'count': self.count,
            'iterations': self.iterations,
            'accepted_moves': self.accepted_moves,
            'final_temperature': self.final_temperature,
            'elapsed_time': self.elapsed_time,
            'score': self.score,
            'seed': self.seed,
            'advertisements': [list(ad.to_tuple()) for ad in self.advertisements],
            'metrics': self.metrics,
        }
