"""
Data models for word count results.
"""

from pydantic import BaseModel, ConfigDict, Field


class WordCountResult(BaseModel):
    """
    A unique word and the number of times it occurs in a text.
    """

    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, description="The normalized unique word")
    count: int = Field(..., ge=1, description="Occurrences of the word in the text")
