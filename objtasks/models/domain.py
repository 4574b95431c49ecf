"""Plain data objects."""

from typing import Any

from pydantic import BaseModel, ConfigDict

_POSITIONAL = ("width", "height")


class Rectangle(BaseModel):
    # Extra keys are kept, like assigning parsed JSON onto a plain object
    model_config = ConfigDict(extra="allow")

    width: int | float
    height: int | float

    def __init__(self, *args: Any, **data: Any) -> None:
        if len(args) > len(_POSITIONAL):
            msg = f"Rectangle takes at most {len(_POSITIONAL)} positional arguments"
            raise TypeError(msg)
        super().__init__(**dict(zip(_POSITIONAL, args)), **data)

    def get_area(self) -> int | float:
        return self.width * self.height
