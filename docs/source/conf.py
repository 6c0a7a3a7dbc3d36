# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information
import os
import sys
sys.path.insert(0, os.path.abspath('../../src'))
project = 'Radiosonde TEMP Parser'
copyright = '2025, Radiosonde TEMP Parser contributors'
author = 'Radiosonde TEMP Parser contributors'
version = '1.0'
release = '1.0.0'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'sphinx.ext.autodoc',       # Core extension for docstring processing
    'sphinx.ext.napoleon',      # For Google-style docstrings (gather_reports)
    'sphinx.ext.viewcode',      # Adds links to highlighted source code
]

templates_path = ['_templates']

source_suffix = '.rst'
master_doc = 'index'

exclude_patterns = []
pygments_style = 'sphinx'
html_theme = 'furo'

# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_static_path = []
autodoc_member_order = 'bysource' # Order members by their appearance in the source file
autodoc_default_options = {
    'members': True,          # Document all public members (functions, classes, methods)
    'undoc-members': True,    # Also document members without docstrings
}
