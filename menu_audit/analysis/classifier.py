# ==============================================
# ImageSourceClassifier
# ==============================================
#
# PURPOSE:
#   Walk the menu items in collection order, classify each `image`
#   and accumulate a ClassificationResult.
#
# CLASS: ImageSourceClassifier
# ----------------------------
#   Stateless — items in, result out.
#
#   Methods:
#   --------
#   - classify_all(items: list[dict]) -> ClassificationResult
#
#   - classify_item(item: dict) -> ImageSource
#
#   Samples:
#   --------
#   Only GRIDFS and PUBLIC items are sampled. The cap (default 5) is
#   shared across both categories and filled in iteration order; once
#   reached, no further samples are taken.
#
# ==============================================

from typing import Any, Dict, Iterable

from .image_source import ImageSource, classify_image
from .result import ClassificationResult, Sample


SAMPLED_SOURCES = frozenset({ImageSource.GRIDFS, ImageSource.PUBLIC})


class ImageSourceClassifier:
    """
    Classifies menu item documents by where their image is stored.
    """

    def __init__(self, sample_limit: int = 5):
        """
        Args:
            sample_limit: Maximum number of example items to keep
        """
        self.sample_limit = sample_limit

    def classify_item(self, item: Dict[str, Any]) -> ImageSource:
        return classify_image(item.get("image"))

    def classify_all(self, items: Iterable[Dict[str, Any]]) -> ClassificationResult:
        """
        Classify every item.

        Args:
            items: Menu item documents, in collection order

        Returns:
            ClassificationResult with counters and up to `sample_limit` samples
        """
        result = ClassificationResult()
        for item in items:
            result.total += 1
            source = self.classify_item(item)
            result.increment(source)

            if source in SAMPLED_SOURCES and len(result.samples) < self.sample_limit:
                result.samples.append(
                    Sample(name=item.get("name"), image=item["image"], category=source)
                )
        return result
