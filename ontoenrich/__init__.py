"""Document parsing, ontology modelling and QuickStatement conversion tools."""

__version__ = "1.0.0"