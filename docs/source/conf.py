# Configuration file for the Sphinx documentation builder.

project = 'RowFrame'
copyright = '2026, RowFrame contributors'
author = 'RowFrame contributors'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.intersphinx',
]

autosummary_generate = True

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pyarrow': ('https://arrow.apache.org/docs', None),
}

html_theme = 'nature'
