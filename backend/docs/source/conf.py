import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent.parent))

project = 'Marine Site Geometry'
copyright = '2025, Marine Licensing'
author = 'Marine Licensing'
release = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx_autodoc_typehints',
    'myst_parser',
]

html_theme = 'sphinx_rtd_theme'

autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}
autodoc_mock_imports = ['pyproj']
