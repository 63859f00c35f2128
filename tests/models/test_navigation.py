"""Unit tests for NavigationHistory."""

from pathlib import Path

from models.navigation import NavigationHistory


class TestNavigationHistory:
    """Test LIFO behavior and the empty-pop edge case."""

    def test_starts_empty(self):
        history = NavigationHistory()

        assert history.is_empty
        assert history.depth == 0

    def test_pop_returns_most_recent_first(self):
        """Verify entries come back in reverse push order."""
        history = NavigationHistory()
        history.push(Path("/a"))
        history.push(Path("/a/b"))
        history.push(Path("/a/b/c"))

        assert history.pop() == Path("/a/b/c")
        assert history.pop() == Path("/a/b")
        assert history.pop() == Path("/a")

    def test_pop_on_empty_returns_none(self):
        """Verify popping an empty history is a no-op, not an error."""
        history = NavigationHistory()

        assert history.pop() is None
        assert history.pop() is None
        assert history.depth == 0

    def test_push_accepts_strings(self):
        """Verify pushed values are stored as Paths."""
        history = NavigationHistory()
        history.push("/tmp/x")

        assert history.pop() == Path("/tmp/x")

    def test_clear(self):
        history = NavigationHistory(entries=[Path("/a"), Path("/b")])
        history.clear()

        assert history.is_empty

    def test_to_dict(self):
        history = NavigationHistory(entries=[Path("/a")])

        assert history.to_dict() == {"entries": [str(Path("/a"))], "depth": 1}
