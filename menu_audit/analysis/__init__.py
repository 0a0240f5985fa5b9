# ==============================================
# ANALYSIS & CLASSIFICATION
# ==============================================
#
# Classifies each menu item's image reference by prefix and
# accumulates the counters shown in the report.
#
# Modules:
# --------
# - image_source.py    → ImageSource enum + ordered prefix rules
# - result.py          → Sample and ClassificationResult data classes
# - classifier.py      → Scans items, fills a ClassificationResult
#
# ==============================================

from .image_source import ImageSource, PrefixRule, IMAGE_SOURCE_RULES, classify_image
from .result import Sample, ClassificationResult
from .classifier import ImageSourceClassifier

__all__ = [
    "ImageSource",
    "PrefixRule",
    "IMAGE_SOURCE_RULES",
    "classify_image",
    "Sample",
    "ClassificationResult",
    "ImageSourceClassifier"
]
