"""Tests for the Streamlit calls made by the pages."""

import inspect
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
PAGE_FILES = [ROOT / "main.py", ROOT / "pages" / "01_dataset.py"]


class TestStretchWidth:
    """Tests for the width="stretch" layout of map, buttons and tables."""

    @pytest.mark.parametrize("element", [st.pydeck_chart, st.button, st.dataframe])
    def test_installed_streamlit_accepts_width(self, element):
        assert "width" in inspect.signature(element).parameters

    @pytest.mark.parametrize("page", PAGE_FILES, ids=lambda path: path.name)
    def test_pages_use_width_stretch(self, page):
        """Test that the pages lay out with width instead of use_container_width."""
        source = page.read_text(encoding="utf-8")

        assert "use_container_width" not in source
        assert 'width="stretch"' in source
