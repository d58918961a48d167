"""Turn-based tetromino placement puzzle with a bag, a reserve, effect cards and a deepest-fit experiment."""

__version__ = "0.1.0"