"""
==============================================
Report Generator
==============================================

Connects to MongoDB, loads the whole menu items collection,
classifies every image reference and prints a short summary.

USAGE:

    from menu_audit.config import load_config
    from menu_audit.report import ReportGenerator

    ok = ReportGenerator(load_config()).run()

OUTPUT:

    Total menu items: 7
    📊 Image source breakdown:
       GridFS images: 3
       Public folder images: 2
       No images: 2

    📁 Sample image sources:
       Falafel Wrap: /api/images/65f0c1 (GridFS)
"""

import sys
from typing import Callable, List, Optional, TextIO

from menu_audit.config import AuditConfig
from menu_audit.analysis import ClassificationResult, ImageSourceClassifier
from menu_audit.storage import MongoClient


def format_report(result: ClassificationResult) -> List[str]:
    """
    Render a ClassificationResult as report lines.

    The unclassified line only appears when at least one image fell
    through every prefix rule.
    """
    lines = [
        f"Total menu items: {result.total}",
        "📊 Image source breakdown:",
        f"   GridFS images: {result.gridfs_count}",
        f"   Public folder images: {result.public_count}",
        f"   No images: {result.none_count}",
    ]
    if result.counted < result.total:
        lines.append(f"   Unclassified (not counted above): {result.unclassified_count}")

    lines.append("")
    lines.append("📁 Sample image sources:")
    for sample in result.samples:
        lines.append(f"   {sample.format_line()}")
    return lines


class ReportGenerator:
    """
    One-shot audit of menu item image sources.

    The MongoDB connection is scoped to a single `run()` call and is
    released on every exit path.
    """

    def __init__(
        self,
        config: AuditConfig,
        client_factory: Callable[..., MongoClient] = MongoClient,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None
    ):
        """
        Args:
            config: Resolved audit configuration
            client_factory: Builds a client from (uri, database, out=...). Tests swap this out.
            out: Stream for the report (defaults to stdout)
            err: Stream for errors (defaults to stderr)
        """
        self.config = config
        self.client_factory = client_factory
        self.out = out
        self.err = err
        self.classifier = ImageSourceClassifier(sample_limit=config.sample_limit)

    def _print(self, line: str = "") -> None:
        print(line, file=self.out or sys.stdout)

    def run(self) -> bool:
        """
        Run the audit once.

        Returns:
            True if the report was printed, False if anything failed.
        """
        try:
            uri = self.config.mongo.require_uri()
            with self.client_factory(uri, self.config.mongo.database, out=self.out) as client:
                self._print("🔍 Checking menu item image sources...\n")
                items = client.find(self.config.collection, {})
                result = self.classifier.classify_all(items)
                for line in format_report(result):
                    self._print(line)
        except Exception as e:
            print(f"Error: {type(e).__name__}: {e}", file=self.err or sys.stderr)
            return False
        return True
