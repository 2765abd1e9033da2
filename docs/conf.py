#!/usr/bin/env python3

# flake8: noqa
# pylint: skip-file
import os
import sys

cwd = os.getcwd()
project_root = os.path.dirname(cwd) + "/src"
sys.path.insert(0, project_root)

from datetime import date

import safecollections

# -- General configuration ---------------------------------------------

# The full version, including alpha/beta/rc tags.
release = safecollections.__version__

extensions = [
    "sphinxcontrib.apidoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",
    "sphinx.ext.autodoc",
    "sphinx_autodoc_typehints",
]

apidoc_module_dir = "../src/safecollections"
apidoc_output_dir = "apiref"
apidoc_excluded_paths = ["tests"]
apidoc_separate_modules = True
apidoc_module_first = True
apidoc_extra_args = ["-H", "API reference for safecollections"]

autoclass_content = "both"

napoleon_include_special_with_doc = False

# The master toctree document.
master_doc = "index"

# General information about the project.
project = "safecollections"
current_year = date.today().year
copyright = f"{current_year}, safe-collections developers (release {release})"

# Sort members by input order in classes
autodoc_member_order = "bysource"
autodoc_default_flags = ["members", "show_inheritance"]

exclude_patterns = ["_build"]

pygments_style = "sphinx"

html_theme = "sphinx_rtd_theme"
