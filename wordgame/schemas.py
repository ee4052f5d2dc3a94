from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Player(BaseModel):
    name: str
    # accepted words, in submission order
    words: List[str] = []
    score: int = 0


class SubmissionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int = Field(..., ge=0)
    player_name: str
    word: str
    score: int = Field(..., ge=0)


class ScoreBoardState(BaseModel):
    starting_string: str
    players: List[Player]
    submissions: List[SubmissionRecord]
    used_words: List[str]
