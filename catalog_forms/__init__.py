"""catalog-forms: product create/edit form lifecycle engine."""

__version__ = "0.1.0"
