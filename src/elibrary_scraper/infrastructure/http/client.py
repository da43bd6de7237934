"""HTTP client factory with sensible defaults."""

from httpx import AsyncClient, Limits, Timeout

DEFAULT_TIMEOUT_SECONDS = 20.0


class HTTPClientFactory:
    """Factory for creating HTTP clients with consistent configuration."""

    @staticmethod
    def create(
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS, verify: bool = True
    ) -> AsyncClient:
        """Create a new AsyncClient with sensible defaults.

        Args:
            timeout_seconds: Request timeout in seconds.
            verify: Whether to verify TLS certificates. Only this client is
                affected; other clients in the process keep their own setting.

        Returns:
            Configured AsyncClient instance. The caller owns it and should
            close it, e.g. with ``async with``.
        """
        timeout = Timeout(timeout_seconds)
        limits = Limits(max_keepalive_connections=10, max_connections=50)
        return AsyncClient(
            timeout=timeout,
            limits=limits,
            verify=verify,
            follow_redirects=True,
        )
