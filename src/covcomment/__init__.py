"""coverage-comment: coverage summary tables and pull request comments."""

__version__ = "0.1.0"
