"""French and English stop words used by the text cleaner."""

FRENCH_STOP_WORDS: frozenset[str] = frozenset({
    # Articles and elided forms
    "le", "la", "les", "un", "une", "des", "du", "de", "d", "l",
    "c", "n", "s", "j", "qu", "m", "t",
    # Conjunctions
    "et", "ou", "mais", "donc", "or", "ni", "car",
    # Pronouns
    "je", "tu", "il", "elle", "on", "nous", "vous", "ils", "elles",
    "me", "te", "se", "lui", "leur", "y", "en",
    "ce", "cet", "cette", "ces",
    "mon", "ton", "son", "ma", "ta", "sa", "mes", "tes", "ses",
    "notre", "votre", "nos", "vos", "leurs",
    "qui", "que", "quoi", "dont", "où", "lequel", "laquelle",
    # Prepositions
    "au", "aux", "avec", "sans", "sous", "sur", "dans", "par", "pour",
    "vers", "chez", "entre", "contre", "depuis", "pendant",
    # Common verbs and forms
    "être", "avoir", "faire", "dire", "aller", "voir", "pouvoir", "vouloir",
    "est", "sont", "suis", "es", "sommes", "êtes", "était", "été",
    "a", "ont", "avait", "eu", "fait", "dit", "va", "vont", "peut", "veut",
    # Adverbs and other function words
    "ne", "pas", "plus", "moins", "très", "bien", "mal",
    "tout", "tous", "toute", "toutes", "autre", "autres",
    "même", "aussi", "comme", "si", "quand", "alors", "ainsi",
})

ENGLISH_STOP_WORDS: frozenset[str] = frozenset({
    # Determiners and articles
    "the", "a", "an",
    # Conjunctions and prepositions
    "and", "or", "but", "if", "then", "else", "when", "because", "as",
    "until", "while",
    "at", "from", "by", "for", "with", "about", "against", "between",
    "into", "through", "during", "before", "after", "above", "below",
    "to", "of", "in", "on", "off", "over", "under",
    # Pronouns
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves",
    "you", "your", "yours", "yourself", "yourselves",
    "he", "him", "his", "himself", "she", "her", "hers", "herself",
    "it", "its", "itself", "they", "them", "their", "theirs",
    "what", "which", "who", "whom", "this", "that", "these", "those",
    # Be/have/do forms
    "am", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    # Modals
    "will", "would", "could", "should", "may", "might", "must", "shall",
    "can",
    # Adverbs and other function words
    "not", "no", "nor", "only", "own", "same", "so", "than", "too",
    "very", "just", "now",
    "all", "each", "every", "both", "few", "more", "most",
    "other", "some", "such", "any",
})

STOP_WORDS: frozenset[str] = FRENCH_STOP_WORDS | ENGLISH_STOP_WORDS
