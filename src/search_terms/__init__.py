"""
Search term discovery for systematic reviews.

Extracts candidate terms from titles/abstracts or author keywords, builds a
term co-occurrence network, ranks terms by node importance and keeps the
terms above a data-driven cutoff:

- term_extraction: fakerake n-grams and tagged keywords
- matrix: document-feature matrix
- network: trimmed co-occurrence graph
- scoring: node importance ranking and n-gram filters
- cutoff: changepoint and cumulative cutoffs
- reduction: reduced graph and final keywords
"""

from .cutoff import changepoint_cutoffs, cumulative_cutoff, find_cutoff
from .data_models import (
    CutoffMethod,
    DocumentFeatureMatrix,
    ExtractionMethod,
    ImportanceMethod,
    ImportanceRow,
    StudyDoc,
)
from .errors import (
    EmptyNetworkError,
    InvalidPatternError,
    MissingInputError,
    SearchTermsError,
    UnsupportedOptionError,
)
from .matrix import create_dfm
from .network import create_network
from .pipeline import KeywordSuggestion, suggest_keywords
from .reduction import get_keywords, reduce_graph
from .scoring import make_importance, select_ngrams, select_unigrams
from .term_extraction import extract_terms, fakerake
from .text_utils import clean_keywords, get_ngrams, get_stopwords, remove_punctuation

__all__ = [
    "CutoffMethod",
    "DocumentFeatureMatrix",
    "ExtractionMethod",
    "ImportanceMethod",
    "ImportanceRow",
    "StudyDoc",
    "EmptyNetworkError",
    "InvalidPatternError",
    "MissingInputError",
    "SearchTermsError",
    "UnsupportedOptionError",
    "extract_terms",
    "fakerake",
    "create_dfm",
    "create_network",
    "make_importance",
    "select_ngrams",
    "select_unigrams",
    "find_cutoff",
    "changepoint_cutoffs",
    "cumulative_cutoff",
    "reduce_graph",
    "get_keywords",
    "suggest_keywords",
    "KeywordSuggestion",
    "clean_keywords",
    "get_ngrams",
    "get_stopwords",
    "remove_punctuation",
]
