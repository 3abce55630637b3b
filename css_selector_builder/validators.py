from typing import Optional, TYPE_CHECKING
import logging

from .exceptions import DuplicateFragmentError, OrderViolationError
from .fragments import FragmentKind, SINGLE_OCCURRENCE_KINDS

if TYPE_CHECKING:
    from .selector import Selector

logger = logging.getLogger(__name__)

class FragmentValidator:
    """Checks that a fragment may extend an existing compound selector chain."""

    def check_duplicate(self, previous: "Selector", kind: FragmentKind) -> None:
        """Raise DuplicateFragmentError if a single-occurrence kind is already in the chain."""
        if kind in SINGLE_OCCURRENCE_KINDS and previous.has_any({kind}):
            logger.debug(f"Rejected duplicate {kind.value} fragment after {previous.render()!r}")
            raise DuplicateFragmentError(kind)

    def check_order(self, previous: "Selector", kind: FragmentKind) -> None:
        """Raise OrderViolationError if any fragment in the chain must come after ``kind``."""
        if previous.has_any(kind.kinds_after()):
            logger.debug(f"Rejected out of order {kind.value} fragment after {previous.render()!r}")
            raise OrderViolationError(kind)

    def validate_extension(self, previous: Optional["Selector"], kind: FragmentKind) -> None:
        """
        Validate appending a fragment of ``kind`` onto ``previous``.

        Args:
            previous: The chain being extended, or None for a root fragment
            kind: Kind of the fragment being appended

        Raises:
            DuplicateFragmentError: element, id or pseudo-element already present
            OrderViolationError: the chain holds a kind ordered after ``kind``
        """
        if previous is None:
            return

        self.check_duplicate(previous, kind)
        self.check_order(previous, kind)
