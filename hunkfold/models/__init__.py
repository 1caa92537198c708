"""
Data models for hunkfold.
"""
from .hunk import Hunk
