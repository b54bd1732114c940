"""JewelCalc - jewellery catalog backend with derived sale pricing."""

__version__ = "1.0.0"
