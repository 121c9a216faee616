"""Sphinx configuration for charsetkit documentation."""

import charsetkit

project = "charsetkit"
copyright = "2026, charsetkit contributors"
author = "charsetkit contributors"
release = charsetkit.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

autosummary_generate = True

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"charsetkit {release}"
html_static_path = ["_static"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "chardet": ("https://chardet.readthedocs.io/en/latest", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
# Show the error hierarchy (LookupError / ValueError bases) on the API pages.
autodoc_default_options = {"members": True, "show-inheritance": True}

# index.rst mixes Python and shell sessions; copy only the commands.
copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True
