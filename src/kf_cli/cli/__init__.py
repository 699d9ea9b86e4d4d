"""kf command-line interface."""
