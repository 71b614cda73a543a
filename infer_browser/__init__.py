"""
Top-level package for the inference browser.

This package exposes the core pieces (parsing, model runtime), the service
layer and the Dash UI adapter. Most code should import from submodules such as:
    infer_browser.core
    infer_browser.services
    infer_browser.ui
"""

__all__: list[str] = []
