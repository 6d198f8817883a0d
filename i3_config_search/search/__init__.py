"""
Fuzzy ranking, highlighting and interactive search state.
"""
from .matcher import FuzzyMatcher
from .ranker import Ranker, filter_entries
from .session import SearchSession

__all__ = ['FuzzyMatcher', 'Ranker', 'SearchSession', 'filter_entries']
