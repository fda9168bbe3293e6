"""Tests for move results and traversal conditions."""

import pytest

from hiphtml.shared.result import MoveResult, TraversalCondition, TraversalError


class TestTraversalCondition:
    """Test TraversalCondition messages."""

    def test_condition_messages(self):
        """Test the human readable messages."""
        assert (
            TraversalCondition.BEGINNING_OF_DOCUMENT.message
            == "reached beginning of document"
        )
        assert TraversalCondition.END_OF_DOCUMENT.message == "reached end of document"
        assert (
            TraversalCondition.NO_SUCH_RELATIVE.message
            == "node does not have requested rel"
        )


class TestMoveResult:
    """Test MoveResult construction and truthiness."""

    def test_successful_result(self):
        """Test a result that carries a node."""
        node = object()
        result = MoveResult.moved(node, 3)

        assert result.success is True
        assert bool(result) is True
        assert result.node is node
        assert result.depth == 3
        assert result.condition is None
        assert result.unwrap() is node

    def test_failed_result(self):
        """Test a result that carries a condition."""
        result = MoveResult.failed(TraversalCondition.END_OF_DOCUMENT)

        assert result.success is False
        assert not result
        assert result.node is None

    def test_unwrap_failed_result_raises(self):
        """Test unwrap on a failed result."""
        result = MoveResult.failed(TraversalCondition.NO_SUCH_RELATIVE)

        with pytest.raises(TraversalError, match="requested rel") as exc_info:
            result.unwrap()
        assert exc_info.value.condition is TraversalCondition.NO_SUCH_RELATIVE

    def test_empty_string_node_is_still_success(self):
        """Test that falsy nodes such as empty text do not read as failure."""
        result = MoveResult.moved("", 1)

        assert result.success
        assert result

    def test_success_without_node_is_rejected(self):
        """Test validation of inconsistent results."""
        with pytest.raises(ValueError, match="must carry a node"):
            MoveResult()

    def test_negative_depth_is_rejected(self):
        """Test depth validation."""
        with pytest.raises(ValueError, match="Depth must be >= 0"):
            MoveResult.moved(object(), -1)

    def test_result_is_immutable(self):
        """Test that results are frozen."""
        result = MoveResult.moved(object(), 0)

        with pytest.raises(AttributeError):
            result.depth = 5  # type: ignore[misc]
