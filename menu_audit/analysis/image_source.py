# ==============================================
# Image Source (Enum + Prefix Rules)
# ==============================================
#
# PURPOSE:
#   Decide where a menu item's image is served from, based only on
#   the shape of its `image` reference.
#
# ENUMS:
# ------
# - ImageSource(Enum): GRIDFS, PUBLIC, NONE, UNCLASSIFIED
#
# RULES (evaluated in order, most specific prefix first):
# -------------------------------------------------------
#   1. empty / missing value        → NONE
#   2. starts with "/api/images/"   → GRIDFS  (served out of GridFS by the API)
#   3. starts with "/"              → PUBLIC  (static file in the public folder)
#   4. anything else                → UNCLASSIFIED
#
#   UNCLASSIFIED values (e.g. "http://cdn/x.jpg") are not part of any
#   reported counter. The breakdown therefore may not add up to the
#   total item count.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Any, Tuple


class ImageSource(Enum):
    """
    Where a menu item image lives.

    The value is the label used in the printed report.
    """
    GRIDFS = "GridFS"
    PUBLIC = "Public"
    NONE = "None"
    UNCLASSIFIED = "Unclassified"


@dataclass(frozen=True)
class PrefixRule:
    """A single `startswith` rule mapping an image reference to a source."""
    prefix: str
    source: ImageSource

    def matches(self, image: str) -> bool:
        return image.startswith(self.prefix)


GRIDFS_PREFIX = "/api/images/"
PUBLIC_PREFIX = "/"

IMAGE_SOURCE_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule(GRIDFS_PREFIX, ImageSource.GRIDFS),
    PrefixRule(PUBLIC_PREFIX, ImageSource.PUBLIC),
)


def classify_image(image: Any) -> ImageSource:
    """
    Classify a raw `image` value.

    Args:
        image: Value of the document's `image` field (may be None or missing)

    Returns:
        The first matching ImageSource
    """
    if not image:
        return ImageSource.NONE
    if not isinstance(image, str):
        return ImageSource.UNCLASSIFIED
    for rule in IMAGE_SOURCE_RULES:
        if rule.matches(image):
            return rule.source
    return ImageSource.UNCLASSIFIED
