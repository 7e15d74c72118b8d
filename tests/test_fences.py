"""Tests for uigen/core/fences.py — markdown fence stripping."""

from uigen.core.fences import unwrap_code_block, unwrap_json, unwrap_jsx


class TestUnwrapCodeBlock:

    def test_plain_text_is_trimmed(self):
        assert unwrap_code_block("  <Card/>\n") == "<Card/>"

    def test_bare_fence_removed(self):
        assert unwrap_code_block("```\n<Card/>\n```") == "<Card/>"

    def test_tagged_fence_removed(self):
        assert unwrap_code_block("```jsx\n<Card/>\n```", languages=("jsx",)) == "<Card/>"

    def test_unknown_tag_leaves_tag_text(self):
        """Only listed tags are stripped; a bare-fence pass leaves the tag word."""
        assert unwrap_code_block("```tsx\n<Card/>\n```", languages=("jsx",)) == "tsx\n<Card/>"

    def test_empty_input(self):
        assert unwrap_code_block("") == ""
        assert unwrap_code_block(None) == ""

    def test_surrounding_prose_is_kept(self):
        text = "Here you go:\n```jsx\n<Card/>\n```"
        assert unwrap_jsx(text) == "Here you go:\n\n<Card/>"


class TestUnwrapJson:

    def test_json_fence(self):
        assert unwrap_json('```json\n{"layout": "centered"}\n```') == '{"layout": "centered"}'

    def test_no_fence(self):
        assert unwrap_json('  {"a": 1}  ') == '{"a": 1}'


class TestUnwrapJsx:

    def test_jsx_fence(self):
        assert unwrap_jsx("```jsx\n<Card>\n  <Button/>\n</Card>\n```") == "<Card>\n  <Button/>\n</Card>"
