"""ReviewAggregator: derived rating of a shop from its comments."""

import math

from shops.shop.comments import parse_review


class ReviewAggregator:
    @staticmethod
    def recompute(comments) -> tuple[int, float]:
        """Return ``(total_review, average_review)`` for ``comments``.

        The average is rounded to 2 decimal places and is 0.0 when there are
        no comments. Each review is scaled by the count before summing, so any
        set of finite reviews yields a finite average.
        """
        total = len(comments)
        if total == 0:
            return 0, 0.0
        average = math.fsum(parse_review(comment["review"]) / total for comment in comments)
        return total, round(average, 2)
