"""
Configuration defaults for search term discovery.
"""

DEFAULT_LANGUAGE = "English"

# Term extraction
DEFAULT_MIN_FREQ = 2   # minimum pooled occurrences of a candidate term
DEFAULT_MIN_N = 2      # shortest n-gram considered
DEFAULT_MAX_N = 5      # longest n-gram considered
DEFAULT_NGRAMS = True  # keep only terms with word count in [min_n, max_n]
DEFAULT_TAGGED_MIN_CHARS = 3  # author keywords shorter than this are dropped

# Network trimming
DEFAULT_MIN_STUDIES = 3  # term must appear in at least this many documents
DEFAULT_MIN_OCC = 3      # term must occur at least this many times in total

# Importance measures
DEFAULT_ALPHA_CENTRALITY = 0.1  # attenuation factor for alpha (Katz) centrality
DEFAULT_POWER_EXPONENT = 1.0    # Bonacich power centrality exponent

# Cutoff selection
DEFAULT_PERCENT = 0.8   # share of total importance to capture (cumulative)
DEFAULT_KNOT_NUM = 3    # maximum changepoints searched (changepoint)
DEFAULT_CUTOFF_INDEX = 0  # which changepoint candidate the pipeline applies (0 = lowest)

# CLI
DEFAULT_OUTPUT_DIR = "output/keywords"
DEFAULT_WORKERS = 1
