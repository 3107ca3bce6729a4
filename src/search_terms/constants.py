"""
Constants used for term extraction.
"""

# Sentinel token substituted for punctuation so n-grams never span it.
BOUNDARY_TOKEN = "<_>"

# Tokens that break n-gram windows in addition to the language stopwords.
PUNCTUATION_STOPS = {
    ",", ".", ":", ";", "[", "]", "/", "(", ")", "\"", "&", "=", "<", ">",
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
}

# Characters stripped from author keyword strings before splitting.
KEYWORD_REMOVALS = "():=%+<>?\\&!$*[]"

# Connective used to join author keyword strings; cleaning turns it into ";".
KEYWORD_CONNECTIVE = " and "

# Values that mean "no keywords supplied" in exported bibliographic records.
MISSING_KEYWORD_VALUES = {"NA", "na"}

ENGLISH_STOPWORDS = {
    # Articles, determiners, quantifiers
    "a", "an", "the", "this", "that", "these", "those", "each", "every",
    "either", "neither", "all", "any", "both", "few", "many", "much", "more",
    "most", "less", "least", "several", "some", "such", "no", "nor", "not",
    "only", "own", "same", "other", "another", "very", "too", "so", "than",
    # Pronouns
    "i", "me", "my", "myself", "mine", "we", "us", "our", "ours", "ourselves",
    "you", "your", "yours", "yourself", "yourselves", "he", "him", "his",
    "himself", "she", "her", "hers", "herself", "it", "its", "itself", "they",
    "them", "their", "theirs", "themselves", "one", "ones",
    "what", "which", "who", "whom", "whose", "whatever", "whichever",
    # Prepositions and conjunctions
    "about", "above", "across", "after", "against", "along", "among", "amongst",
    "around", "as", "at", "before", "behind", "below", "beneath", "beside",
    "besides", "between", "beyond", "by", "despite", "down", "during", "except",
    "for", "from", "in", "inside", "into", "like", "near", "of", "off", "on",
    "onto", "out", "outside", "over", "per", "since", "through", "throughout",
    "to", "toward", "towards", "under", "underneath", "until", "unto", "up",
    "upon", "via", "with", "within", "without", "and", "but", "or", "if",
    "because", "although", "though", "while", "whereas", "whether", "unless",
    "once", "then", "else", "thus", "hence", "therefore", "however",
    "moreover", "furthermore", "also", "yet", "still", "even", "ever",
    # Auxiliaries and common verbs
    "am", "is", "are", "was", "were", "be", "been", "being", "have", "has",
    "had", "having", "do", "does", "did", "doing", "done", "can", "cannot",
    "could", "may", "might", "must", "shall", "should", "will", "would",
    "ought", "get", "gets", "got", "make", "makes", "made", "use", "used",
    "using", "uses",
    # Adverbs of place, time and manner
    "here", "there", "where", "when", "why", "how", "again", "already",
    "always", "never", "often", "sometimes", "usually", "now", "just",
    "well", "rather", "quite", "almost", "perhaps", "thereby", "therein",
    "wherein", "whereby", "etc", "ie", "eg", "vs",
    # Contraction fragments left behind by punctuation removal
    "s", "t", "d", "ll", "m", "re", "ve", "don", "doesn", "didn", "isn",
    "aren", "wasn", "weren", "won", "wouldn", "couldn", "shouldn", "hasn",
    "haven", "hadn",
}

STOPWORDS_BY_LANGUAGE = {
    "english": ENGLISH_STOPWORDS,
}
