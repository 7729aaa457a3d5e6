"""Word frequency counting service."""

from collections import Counter

from ..models import WordCountResult

# Single code point lowercase mappings for characters whose str.lower()
# expands to two code points ("İ" -> "i" + U+0307).
_SIMPLE_LOWER = {"\u0130": "i"}


def _lower_char(ch: str) -> str:
    # Per code point, so context rules such as final sigma never apply
    return _SIMPLE_LOWER.get(ch) or ch.lower()


class WordCounter:
    """Counts the occurrences of each unique word in a text.

    Words are maximal runs of Unicode letters. Text is lower-cased, every
    code point that is neither a letter nor whitespace becomes a separator,
    and whitespace runs are collapsed before splitting. No script-aware
    segmentation is done, so CJK text without spaces is a single word.

    The service holds no state and is safe to share between requests.
    """

    def normalize(self, content: str) -> str:
        """Lower-case the text and reduce it to single-space separated words.

        Args:
            content: The text to normalize

        Returns:
            The letters-only text, words separated by one ASCII space
        """
        lowered = "".join(_lower_char(ch) for ch in content)

        # Replace rather than delete so "hello...world" stays two words
        letters_only = "".join(
            ch if ch.isalpha() or ch.isspace() else " " for ch in lowered
        )

        return " ".join(letters_only.split())

    def count_words(self, content: str) -> list[WordCountResult]:
        """Count the frequency of each unique word in the text.

        Args:
            content: The text to analyze, may be empty

        Returns:
            One WordCountResult per distinct word, in no particular order
        """
        if not content:
            return []

        tokens = [token for token in self.normalize(content).split(" ") if token]
        counts = Counter(tokens)

        return [WordCountResult(word=word, count=count) for word, count in counts.items()]


# Global word counter instance
word_counter = WordCounter()


def normalize(content: str) -> str:
    """Normalize text with the shared WordCounter."""
    return word_counter.normalize(content)


def count_words(content: str) -> list[WordCountResult]:
    """Count words with the shared WordCounter."""
    return word_counter.count_words(content)
