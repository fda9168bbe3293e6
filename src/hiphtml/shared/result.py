"""Result objects and traversal conditions for cursor navigation.

Reaching the end of a document or asking for a sibling that does not exist
are ordinary outcomes of walking a tree, so every cursor move reports them
as values rather than raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class TraversalCondition(Enum):
    """Named reasons a cursor move did not happen."""

    BEGINNING_OF_DOCUMENT = "reached beginning of document"
    END_OF_DOCUMENT = "reached end of document"
    NO_SUCH_RELATIVE = "node does not have requested rel"

    @property
    def message(self) -> str:
        """Human readable description of the condition."""
        return self.value


class TraversalError(Exception):
    """Raised by ``MoveResult.unwrap`` when a move did not succeed."""

    def __init__(self, condition: TraversalCondition) -> None:
        super().__init__(condition.message)
        self.condition = condition


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single cursor operation.

    On success ``node`` and ``depth`` describe where the cursor now stands and
    ``condition`` is ``None``. On failure ``node`` is ``None`` and
    ``condition`` names what was missing. The object is truthy exactly when
    the move succeeded, so ``while cursor.next(): ...`` reads naturally.
    """

    node: Any = None
    depth: int = 0
    condition: Optional[TraversalCondition] = None

    def __post_init__(self) -> None:
        """Validate result consistency."""
        if self.condition is None and self.node is None:
            raise ValueError("Successful move result must carry a node")
        if self.depth < 0:
            raise ValueError("Depth must be >= 0")

    @classmethod
    def moved(cls, node: Any, depth: int) -> "MoveResult":
        """Create a successful result."""
        return cls(node=node, depth=depth)

    @classmethod
    def failed(cls, condition: TraversalCondition) -> "MoveResult":
        """Create a failed result for the given condition."""
        return cls(condition=condition)

    @property
    def success(self) -> bool:
        """Check if the move happened."""
        return self.condition is None

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> Any:
        """Return the node, raising ``TraversalError`` if the move failed."""
        if self.condition is not None:
            raise TraversalError(self.condition)
        return self.node
