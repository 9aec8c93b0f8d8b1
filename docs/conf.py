"""Sphinx configuration file for LinMatch documentation."""

import os
import sys

# Add the project root to the path so we can import linmatch
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from linmatch import __version__  # noqa: E402  pylint: disable=wrong-import-position

project = "LinMatch"
release = __version__
version = ".".join(__version__.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",  # Google-style docstrings
    "myst_parser",
]

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
master_doc = "index"

html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 2,
}

autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_param = True
napoleon_use_rtype = True

exclude_patterns = ["_build"]
