"""Services for Word Counter."""

from .upload import UploadValidationError, decode_text, read_upload, validate_upload
from .word_count import WordCounter, count_words, normalize

__all__ = [
    "UploadValidationError",
    "WordCounter",
    "count_words",
    "decode_text",
    "normalize",
    "read_upload",
    "validate_upload",
]
