"""
Fixed table rules.

The delimiter and column names are part of the input contract; the width and
currency symbol are defaults that settings may override.
"""

DELIMITER = ","
COLUMN_WIDTH = 15
PRICE_COLUMN = "Price"
UNITS_COLUMN = "UnitsSold"
CURRENCY_SYMBOL = "$"
