"""Rectangle value object."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class Rectangle(BaseModel):
    """Axis-aligned rectangle described by its width and height.

    Extra fields are kept so data loaded with ``from_json`` survives intact.
    """

    model_config = ConfigDict(extra="allow")

    width: Union[int, float]
    height: Union[int, float]

    def get_area(self) -> Union[int, float]:
        return self.width * self.height
