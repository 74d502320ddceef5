"""WOLFLIX Catalog

Domain core of the Wolflix media catalog. It models content categories used
to classify catalog items into named, describable, activatable groups, and
the validation rules that keep every category well formed.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
