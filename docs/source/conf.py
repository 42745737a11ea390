"""Sphinx documentation configuration for executor-resources."""

from __future__ import annotations

import sys
from pathlib import Path

# -- Project information -----------------------------------------------------

project = "Executor Resources"
copyright = "2026, Executor Resources contributors"
author = "Executor Resources contributors"

# -- General configuration ---------------------------------------------------

# Make package importable for autodoc (src layout)
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

exclude_patterns: list[str] = []

autodoc_member_order = "bysource"

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
