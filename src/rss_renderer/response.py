"""HTTP response capability consumed by the renderer."""

import json
from typing import Any, Protocol


class ResponseWriter(Protocol):
    """Minimal response interface the renderer writes to.

    Any HTTP framework response can be adapted by implementing these four
    methods.
    """

    def set_status(self, code: int) -> None: ...

    def set_content_type(self, mime: str) -> None: ...

    def send_json(self, obj: Any) -> None: ...

    def send_text(self, body: str) -> None: ...


class BufferedResponse:
    """In-memory response that records what was written to it.

    Example:
        >>> response = BufferedResponse()
        >>> render(payload, None, response)
        >>> response.status_code, response.content_type
        (200, 'text/rss+xml')
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.content_type: str | None = None
        self.body: str | None = None

    def set_status(self, code: int) -> None:
        self.status_code = code

    def set_content_type(self, mime: str) -> None:
        self.content_type = mime

    def send_json(self, obj: Any) -> None:
        if self.content_type is None:
            self.content_type = "application/json"
        self.body = json.dumps(obj)

    def send_text(self, body: str) -> None:
        self.body = body

    @property
    def ok(self) -> bool:
        """Whether the response carries a successful status."""
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        """Decode a JSON body."""
        return json.loads(self.body or "null")
