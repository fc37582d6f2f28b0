"""
Generator State Schema
======================

Snapshot of an ``MT19937_64`` instance: the 312-word state vector plus
the cursor. This is an export/import extension and not part of the
reference algorithm; nothing here is written to disk.

Usage:
    state = gen.getstate()
    text = state.to_json()
    clone = MT19937_64.from_state(GeneratorState.from_json(text))
"""

import json
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import NN, MASK64, UNSEEDED


class GeneratorState(BaseModel):
    """
    Words and cursor of one generator.

    cursor == 312 means the current generation is used up (next draw
    twists); cursor == 313 means the generator was never seeded, in
    which case the words carry no meaning and must all be zero.
    """
    words: List[int] = Field(
        ...,
        min_length=NN,
        max_length=NN,
        description="State vector, each an unsigned 64-bit integer"
    )
    cursor: int = Field(
        ...,
        ge=0,
        le=UNSEEDED,
        description="Words consumed from the current generation (313 = unseeded)"
    )

    @field_validator('words')
    @classmethod
    def validate_word_range(cls, words: List[int]) -> List[int]:
        for i, w in enumerate(words):
            if w < 0 or w > MASK64:
                raise ValueError(f"words[{i}] = {w} is outside the unsigned 64-bit range")
        return words

    @model_validator(mode='after')
    def validate_unseeded_is_blank(self):
        if self.cursor == UNSEEDED and any(self.words):
            raise ValueError("unseeded state (cursor=313) must not carry words")
        return self

    @property
    def is_seeded(self) -> bool:
        return self.cursor != UNSEEDED

    def to_json(self, indent=None) -> str:
        """Serialize to JSON text."""
        return json.dumps(self.model_dump(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "GeneratorState":
        """Parse JSON text produced by :meth:`to_json`."""
        return cls.model_validate(json.loads(text))

    @classmethod
    def unseeded(cls) -> "GeneratorState":
        return cls(words=[0] * NN, cursor=UNSEEDED)
