import re

# Checked in order, first match wins
SCRIPT_PATTERNS = (
    ("bn", re.compile(r"[\u0980-\u09FF]")),  # Bengali
    ("ar", re.compile(r"[\u0600-\u06FF]")),  # Arabic
    ("zh", re.compile(r"[\u4e00-\u9fff]")),  # CJK unified ideographs
)

DEFAULT_LANGUAGE = "en"


def detect_language(text: str) -> str:
    """Guess a language code from the Unicode script of the text."""
    for code, pattern in SCRIPT_PATTERNS:
        if pattern.search(text):
            return code
    return DEFAULT_LANGUAGE
