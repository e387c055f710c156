"""pva — Photos video analyzer."""

__version__ = "0.1.0"
