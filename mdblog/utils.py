import math
import re

CODE_BLOCK_PATTERN = re.compile(r"```[\s\S]*?```")
INLINE_CODE_PATTERN = re.compile(r"`[^`]*`")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]*\)")
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
HEADER_PATTERN = re.compile(r"#+\s+")
HORIZONTAL_RULE_PATTERN = re.compile(r"---+")
LIST_MARKER_PATTERN = re.compile(r"^\s*[-*+]\s+", re.MULTILINE)
BLOCKQUOTE_PATTERN = re.compile(r"^>\s+", re.MULTILINE)
WHITESPACE_PATTERN = re.compile(r"\s+")

WORDS_PER_MINUTE = 200
MIN_READING_TIME = 1


def strip_markdown(text: str, block_syntax: bool = False) -> str:
    """
    Reduce markdown to plain words.

    Code, images and HTML tags are dropped and links keep their text. With
    ``block_syntax`` headers, rules, list and blockquote markers go too.
    """
    text = CODE_BLOCK_PATTERN.sub("", text)
    text = INLINE_CODE_PATTERN.sub("", text)
    # Images first, otherwise the link pattern would keep their alt text
    text = IMAGE_PATTERN.sub("", text)
    text = LINK_PATTERN.sub(r"\1", text)
    text = HTML_TAG_PATTERN.sub("", text)

    if block_syntax:
        text = HEADER_PATTERN.sub("", text)
        text = HORIZONTAL_RULE_PATTERN.sub("", text)
        text = LIST_MARKER_PATTERN.sub("", text)
        text = BLOCKQUOTE_PATTERN.sub("", text)

    return WHITESPACE_PATTERN.sub(" ", text).strip()


def _count_words(text: str) -> int:
    return len([word for word in text.split() if word])


def calculate_word_count(text) -> int:
    if not text or not isinstance(text, str):
        return 0
    return _count_words(strip_markdown(text))


def calculate_reading_time(text) -> int:
    """Minutes to read ``text`` at 200 words per minute, rounded up."""
    if not text or not isinstance(text, str):
        return 0
    words = _count_words(strip_markdown(text, block_syntax=True))
    minutes = math.ceil(words / WORDS_PER_MINUTE)
    return max(MIN_READING_TIME, minutes)
