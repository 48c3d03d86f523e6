"""Candidate/job fit scoring and shortlisting."""

__version__ = "0.1.0"

__all__ = ["__version__"]
