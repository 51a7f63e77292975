"""Income classification on census-style CSV data with tuned logistic regression."""

__version__ = "0.1.0"