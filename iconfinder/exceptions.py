"""Icon finder specific exceptions."""


class IconResolutionError(Exception):
    """Base class for failures that end an icon resolution."""


class EmptyTargetError(IconResolutionError):
    """Raised when no target URL was given."""


class InvalidTargetUrlError(IconResolutionError):
    """Raised when the target URL cannot be parsed."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Invalid URL: {target}")
        self.target = target


class PageFetchError(IconResolutionError):
    """Raised when fetching the target page returns a non-success status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Failed to fetch {url}: {status_code}")
        self.url = url
        self.status_code = status_code


class IconNotFoundError(IconResolutionError):
    """Raised when a fetched page yields no icon candidates at all."""

    def __init__(self) -> None:
        super().__init__("No icons found")
