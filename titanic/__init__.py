""" Titanic survival classifier: csv records -> features -> one-hidden-layer network -> submission. """

__version__ = '0.1.0'
