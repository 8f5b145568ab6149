"""
Test suite for code-fence stripping.

Covers tagged and untagged fences, surrounding chatter, unterminated fences,
idempotency, and the add/strip round trip.

System role: Verification of model output normalization
"""

import pytest

from flowchart_mermaid.core.fences import add_code_fences, strip_code_fences


class TestStripCodeFences:
    """Test suite for strip_code_fences."""

    def test_should_strip_mermaid_tagged_fence(self) -> None:
        """Test tagged fence is removed and content trimmed."""
        assert strip_code_fences("```mermaid\nflowchart TD\nA-->B\n```") == "flowchart TD\nA-->B"

    def test_should_strip_untagged_fence(self) -> None:
        """Test bare triple-backtick fence is removed."""
        assert strip_code_fences("```\ngraph LR\nX-->Y\n```") == "graph LR\nX-->Y"

    def test_should_drop_chatter_around_fenced_block(self) -> None:
        """Test explanatory text outside the block is discarded."""
        text = "Here is your diagram:\n\n```mermaid\nflowchart TD\nA-->B\n```\nLet me know!"

        assert strip_code_fences(text) == "flowchart TD\nA-->B"

    def test_should_strip_unterminated_opening_fence(self) -> None:
        """Test an opening fence without a closing one is removed."""
        assert strip_code_fences("```mermaid\nflowchart TD\nA-->B") == "flowchart TD\nA-->B"

    def test_should_strip_dangling_closing_fence(self) -> None:
        """Test a closing fence without an opening one is removed."""
        assert strip_code_fences("flowchart TD\nA-->B\n```") == "flowchart TD\nA-->B"

    def test_should_handle_crlf_line_endings(self) -> None:
        """Test Windows line endings inside fences."""
        assert strip_code_fences("```mermaid\r\nflowchart TD\r\nA-->B\r\n```") == "flowchart TD\r\nA-->B"

    def test_should_trim_unfenced_text(self) -> None:
        """Test clean text is only trimmed."""
        assert strip_code_fences("  \nflowchart TD\nA-->B\n\n") == "flowchart TD\nA-->B"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_should_return_empty_string_for_blank_input(self, value) -> None:
        """Test blank input yields empty string."""
        assert strip_code_fences(value) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "```mermaid\nflowchart TD\nA-->B\n```",
            "Sure!\n```\nsequenceDiagram\nA->>B: hi\n```",
            "flowchart LR\n  start --> stop",
        ],
    )
    def test_should_be_idempotent(self, text: str) -> None:
        """Test stripping twice equals stripping once."""
        once = strip_code_fences(text)

        assert strip_code_fences(once) == once


class TestAddCodeFences:
    """Test suite for add_code_fences."""

    def test_should_wrap_with_mermaid_tag(self) -> None:
        """Test default language tag."""
        assert add_code_fences("flowchart TD") == "```mermaid\nflowchart TD\n```"

    def test_strip_should_invert_add(self) -> None:
        """Test strip(add(S)) == S for trimmed, fence-free source."""
        source = "flowchart TD\n    A[Start] --> B{Choice}\n    B -->|yes| C((End))"

        assert strip_code_fences(add_code_fences(source)) == source
