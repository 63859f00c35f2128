"""Unit tests for the script command models.

GENERAL PATTERN TESTS: instantiation, validation, immutability, summaries.
COMMAND-SPECIFIC TESTS: keywords and reversibility of each variant.
"""

import pytest
from pydantic import ValidationError

from models.commands import (
    COMMAND_TYPES,
    ChangeDirectory,
    MakeDirectory,
    MakeFile,
    Move,
    Print,
    SetExecutable,
    UnknownCommand,
)


class TestCommandInstantiation:
    """GENERAL PATTERN: Every command carries its source line number."""

    def test_change_directory_fields(self):
        """Verify ChangeDirectory stores target and line number."""
        command = ChangeDirectory(line_number=3, target="sub")

        assert command.target == "sub"
        assert command.line_number == 3
        assert command.keyword == "dir"

    def test_move_fields(self):
        """Verify Move stores source and destination."""
        command = Move(line_number=1, source="a.txt", destination="b.txt")

        assert command.source == "a.txt"
        assert command.destination == "b.txt"
        assert command.keyword == "move"

    def test_unknown_command_keeps_raw_token(self):
        """Verify UnknownCommand keeps the unrecognized token."""
        command = UnknownCommand(line_number=2, raw_token="frobnicate")

        assert command.raw_token == "frobnicate"

    def test_commands_are_frozen(self):
        """Verify commands cannot be modified after creation."""
        command = MakeFile(line_number=1, path="f.txt")

        with pytest.raises(ValidationError):
            command.path = "other.txt"


class TestCommandValidation:
    """GENERAL PATTERN: Path and text arguments must be non-empty."""

    @pytest.mark.parametrize(
        "command_type,field",
        [
            (ChangeDirectory, "target"),
            (MakeDirectory, "path"),
            (MakeFile, "path"),
            (Print, "text"),
            (SetExecutable, "target"),
        ],
    )
    def test_blank_argument_raises(self, command_type, field):
        """Verify whitespace-only arguments are rejected."""
        with pytest.raises(ValidationError, match=f"{field} cannot be empty"):
            command_type(line_number=1, **{field: "   "})

    def test_move_blank_destination_raises(self):
        """Verify Move rejects an empty destination."""
        with pytest.raises(ValidationError, match="destination cannot be empty"):
            Move(line_number=1, source="a", destination="")

    def test_line_number_must_be_positive(self):
        """Verify line numbers are 1-based."""
        with pytest.raises(ValidationError):
            MakeDirectory(line_number=0, path="x")


class TestCommandBehavior:
    """COMMAND-SPECIFIC: keyword table, reversibility and summaries."""

    def test_command_types_cover_grammar(self):
        """Verify every grammar keyword maps to its model."""
        assert COMMAND_TYPES == {
            "dir": ChangeDirectory,
            "mkdir": MakeDirectory,
            "make": MakeFile,
            "print": Print,
            "move": Move,
            "chmod": SetExecutable,
        }

    def test_mutating_commands_are_reversible(self):
        """Verify dir, mkdir, make and move have inverses."""
        assert ChangeDirectory(line_number=1, target="a").is_reversible
        assert MakeDirectory(line_number=1, path="a").is_reversible
        assert MakeFile(line_number=1, path="a").is_reversible
        assert Move(line_number=1, source="a", destination="b").is_reversible

    def test_print_and_chmod_are_not_reversible(self):
        """Verify print and chmod have no inverse."""
        assert not Print(line_number=1, text="hi").is_reversible
        assert not SetExecutable(line_number=1, target="a").is_reversible
        assert not UnknownCommand(line_number=1, raw_token="x").is_reversible

    def test_summary_mentions_line_and_arguments(self):
        """Verify get_summary is a one-line description."""
        summary = Move(line_number=7, source="a", destination="b").get_summary()

        assert summary == "line 7: move a -> b"
