"""Route configuration consumed by request views."""

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from reqview.models.core import split_segments

PLACEHOLDER_PREFIX = ":"


class RouteConfig(BaseModel):
    """Positional mapping from named path placeholders to path segments."""

    model_config = ConfigDict(frozen=True)

    template: str = ""
    request_params: dict[str, NonNegativeInt] = {}

    @classmethod
    def from_template(cls, template: str) -> "RouteConfig":
        """Build the mapping from a ``/users/:id/profile`` style template."""
        request_params: dict[str, int] = {}
        for index, segment in enumerate(split_segments(template, "/")):
            if not segment.startswith(PLACEHOLDER_PREFIX):
                continue
            name = segment[len(PLACEHOLDER_PREFIX):]
            if not name:
                raise ValueError(f"Empty placeholder at segment {index} of {template!r}")
            if name in request_params:
                raise ValueError(f"Duplicate placeholder {name!r} in {template!r}")
            request_params[name] = index
        return cls(template=template, request_params=request_params)

    def index_of(self, name: str) -> int | None:
        return self.request_params.get(name)
