# ==============================================
# ClassificationResult (Data Classes)
# ==============================================
#
# PURPOSE:
#   The aggregate produced by one scan of the menu items collection.
#   Created fresh per run and discarded after printing.
#
# CLASSES:
# --------
# - Sample (dataclass)
#     name, image, category ("GridFS" or "Public")
#
# - ClassificationResult (dataclass)
#     total, gridfs_count, public_count, none_count,
#     unclassified_count, samples
#
# ==============================================

from dataclasses import dataclass, field
from typing import List, Optional

from .image_source import ImageSource


@dataclass(frozen=True)
class Sample:
    """One example menu item shown in the report."""
    name: Optional[str]
    image: str
    category: ImageSource

    def format_line(self) -> str:
        return f"{self.name}: {self.image} ({self.category.value})"


@dataclass
class ClassificationResult:
    """
    Counters and samples collected while scanning the collection.

    `unclassified_count` tracks images that fall through every rule.
    It is kept apart from the three reported counters, so
    gridfs_count + public_count + none_count <= total.
    """

    total: int = 0
    gridfs_count: int = 0
    public_count: int = 0
    none_count: int = 0
    unclassified_count: int = 0
    samples: List[Sample] = field(default_factory=list)

    @property
    def counted(self) -> int:
        """Items that landed in one of the three reported counters."""
        return self.gridfs_count + self.public_count + self.none_count

    def increment(self, source: ImageSource) -> None:
        if source is ImageSource.GRIDFS:
            self.gridfs_count += 1
        elif source is ImageSource.PUBLIC:
            self.public_count += 1
        elif source is ImageSource.NONE:
            self.none_count += 1
        else:
            self.unclassified_count += 1
