"""Catalog API.

Read-mostly product catalog (products, variants, categories) served over HTTP.
"""

__version__ = "0.1.0"
