from pydantic import BaseModel, ConfigDict


class Color(BaseModel):
    """RGB colour with channels nominally in [0.0, 1.0].

    Channels are not range checked; out-of-range values reach the renderer as given.
    """
    model_config = ConfigDict(frozen=True)

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def black(cls) -> "Color":
        return cls()

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)
