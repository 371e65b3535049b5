"""Traversal signals produced by filters.

A walk asks a filter whether to keep going. The answer is one of two
signals; the filter decides which one a match maps to.
"""

from enum import Enum


class VisitResult(Enum):
    """Binary continue/terminate signal consumed by tree walks."""
    CONTINUE = "continue"      # Visit this entry / descend into it
    TERMINATE = "terminate"    # Stop this branch

    def __bool__(self) -> bool:
        return self is VisitResult.CONTINUE

    @classmethod
    def of(cls, matched: bool,
           on_accept: 'VisitResult' = None,
           on_reject: 'VisitResult' = None) -> 'VisitResult':
        """Map a boolean match to a signal without doing any I/O."""
        on_accept = on_accept if on_accept is not None else cls.CONTINUE
        on_reject = on_reject if on_reject is not None else cls.TERMINATE
        return on_accept if matched else on_reject
