from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, Field

ACTIONS = ("verify", "cancel")
STATUS_FILTERS = ("all", "verified", "pending", "today")


class ActionIn(BaseModel):
    id: int = Field(gt=0, strict=True)  # true, "1" и 1.0 не принимаем
    action: Literal["verify", "cancel"]
