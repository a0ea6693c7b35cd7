from typing import Any, Protocol


class HttpResponse(Protocol):
    """
    Protocol for responses returned by an HTTP transport.

    Only the status code and body accessors are relied upon. `httpx.Response`
    satisfies this protocol, so transports built on httpx return it directly.
    """

    @property
    def status_code(self) -> int:
        """The numeric HTTP status code."""
        ...

    @property
    def content(self) -> bytes:
        """The raw response body."""
        ...

    @property
    def text(self) -> str:
        """The response body decoded as text."""
        ...

    def json(self, **kwargs: Any) -> Any:
        """
        The response body parsed as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        ...
