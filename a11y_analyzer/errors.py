"""
Exception Hierarchy

Every error the analyzer raises derives from AnalyzerError so callers
(and the CLI) can catch the whole family in one place.

Rule evaluation anomalies have no class here: a rule that trips
over one element logs and skips it.
"""

from typing import Optional


class AnalyzerError(Exception):
    """Base class for all analyzer errors"""


class MalformedMarkupError(AnalyzerError):
    """Markup could not be tokenized at all. Fatal for the analysis."""


class RuleRegistrationError(AnalyzerError):
    """A rule was registered twice under the same name"""


class UnknownRuleError(AnalyzerError):
    """A rule name was requested that is not in the registry"""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"Unknown rule(s): {', '.join(names)}")


class RetrievalError(AnalyzerError):
    """
    Page retrieval failed before analysis could start.

    Attributes:
        url: The URL that was being fetched
    """

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)


class InvalidURLError(RetrievalError):
    """URL is not an absolute http(s) URL"""


class PageUnreachableError(RetrievalError):
    """DNS lookup or connection failed"""


class PageTimeoutError(RetrievalError):
    """The server did not answer within the configured timeout"""


class PageStatusError(RetrievalError):
    """
    Server answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the server
    """

    def __init__(self, url: str, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        if message is None:
            if status_code == 404:
                message = "Website not found (404). Please check the URL and try again."
            else:
                message = f"Website returned error ({status_code}). Please try a different URL."
        super().__init__(message, url)
