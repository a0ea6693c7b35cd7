# ABOUTME: Abstract HTTP transport interface used for outbound requests
# ABOUTME: Defines a fetch-like contract taking a URL and request options and returning a response

from abc import ABC, abstractmethod

from storefront_auth.models.http.request import RequestOptions
from storefront_auth.models.http.response import HttpResponse


class AbstractHttpTransport(ABC):
    """
    Abstract fetch-like HTTP transport.

    The authenticated client does not implement HTTP itself; it hands every
    request, including refresh calls, to a transport.
    """

    @abstractmethod
    async def request(self, url: str, options: RequestOptions) -> HttpResponse:
        """
        Send one HTTP request.

        Args:
            url: The absolute request target.
            options: Method, headers and body of the request.

        Returns:
            HttpResponse: The response, whatever its status code.

        Raises:
            Exception: Transport-level failures (connection errors, timeouts)
                propagate unchanged to the caller.
        """
        pass
