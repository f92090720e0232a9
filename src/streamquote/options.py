from pydantic import BaseModel, ConfigDict, Field

from streamquote.constants import BUFFER_SIZE, UTF_MAX
from streamquote.types import DelEscape


class ConverterOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    buffer_size: int = Field(
        default=BUFFER_SIZE,
        ge=UTF_MAX,
        description="Capacity of the sliding window in bytes.",
    )
    del_escape: DelEscape = Field(
        default="x",
        description=r"Escape U+007F as \x7f ('x') or with the legacy \u007f form ('u').",
    )

    def with_overrides(self, **overrides: object) -> "ConverterOptions":
        if not overrides:
            return self
        return ConverterOptions.model_validate({**self.model_dump(), **overrides})
