from typing import Union

from pydantic import BaseModel

class Rectangle(BaseModel):
    width: Union[int, float]
    height: Union[int, float]

    def get_area(self) -> Union[int, float]:
        return self.width * self.height
