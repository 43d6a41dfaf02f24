"""Material Search: filter a material list by typed or spoken queries."""

__version__ = "0.1.0"
