"""Tests for prompt template loading."""

from pathlib import Path

import pytest

from app.analysis.exceptions import AnalysisError
from app.analysis.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "botanist" in template
        assert "Plant Name:" in template
        assert "Scientific Name:" in template
        assert "Summary:" in template

    def test_default_template_asks_for_plain_text(self) -> None:
        template = load_prompt_template()
        assert "plain text" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("  Describe this plant.\n")
        result = load_prompt_template(custom)
        assert result == "Describe this plant."

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(AnalysisError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))
