"""
Exceptions raised by the search term pipeline.

All of them are ValueErrors: each one reports an input that cannot produce a
result, and retrying with the same input gives the same outcome.
"""


class SearchTermsError(ValueError):
    """Base class for pipeline errors."""


class MissingInputError(SearchTermsError):
    """Text or keywords required by the chosen extraction method were not given."""


class UnsupportedOptionError(SearchTermsError):
    """An option value is outside its recognized set."""

    def __init__(self, kind: str, value, choices):
        self.kind = kind
        self.value = value
        self.choices = list(choices)
        super().__init__(f"Unsupported {kind}: {value!r} (expected one of {', '.join(self.choices)})")


class EmptyNetworkError(SearchTermsError):
    """Trimming removed every term or every document."""


class InvalidPatternError(SearchTermsError):
    """A term cannot be used as a match pattern."""

    def __init__(self, term: str, reason: str):
        self.term = term
        super().__init__(f"Invalid term pattern {term!r}: {reason}")
