"""phpmake -- scaffolds PHP model, validator, store, presenter and controller files."""

__version__ = "0.1.0"
