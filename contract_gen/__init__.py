"""contract-gen: solar installation contract wizard and document composer."""

__version__ = "0.1.0"
