"""Sphinx configuration for Budget Allocate documentation."""

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

project = "Budget Allocate"
author = "Budget Allocate contributors"
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
]

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
exclude_patterns = ["build"]
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "navigation_depth": 2,
}

myst_enable_extensions = ["colon_fence"]
autodoc_member_order = "bysource"
