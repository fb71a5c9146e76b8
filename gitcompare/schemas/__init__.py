"""Schemas for the application."""

from .comparison import ComparisonResult
from .git import CommitDetails, FileClassification, FileStatus

__all__ = ["CommitDetails", "ComparisonResult", "FileClassification", "FileStatus"]
