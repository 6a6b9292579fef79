# Sphinx configuration for the rsplan API docs.

import os
import sys

sys.path.insert(0, os.path.abspath(".."))

project = "rsplan"
author = "rsplan developers"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.doctest",
    "sphinx.ext.mathjax",
]

# Docstrings use Args:/Returns: sections
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_attr_annotations = True

autosummary_generate = True

doctest_global_setup = """
import numpy as np
from rsplan import *
import matplotlib
matplotlib.use('Agg')
"""

exclude_patterns = ["_build"]
html_theme = "sphinx_rtd_theme"
