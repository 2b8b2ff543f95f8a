from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class BBox:
    """A detected face rectangle in source-image pixel space plus its score.

    Nothing enforces x2 >= x1 or y2 >= y1; degenerate boxes are passed
    through unchanged and left to consumers to handle.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    prob: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
