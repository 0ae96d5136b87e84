# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from pyunitlib import __version__

# -- Project information -----------------------------------------------------

project = 'pyunitlib'
copyright = '2025, pyunitlib contributors'  # noqa
author = 'pyunitlib contributors'
version = __version__  # Short X.Y version.
release = version

# -- General configuration ---------------------------------------------

extensions = ['sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              'sphinx.ext.doctest',
              'sphinx.ext.napoleon']
templates_path = ['_templates']
exclude_patterns = []

autodoc_default_options = {
    'members': True,
    'special-members': '__init__',
    'exclude-members': '__abstractmethods__, __dict__, __hash__, '
                       '__module__, __slots__, __weakref__, '
                       '_unit_table'}
autodoc_member_order = 'groupwise'
napoleon_numpy_docstring = True

# -- Options for HTML output -------------------------------------------

html_theme = 'pydata_sphinx_theme'
html_static_path = ['_static']
