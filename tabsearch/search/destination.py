"""Navigation target for queries that should open a page or a web search."""

import logging
from urllib.parse import quote

from pydantic import HttpUrl, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_URL_TEMPLATE = "https://www.google.com/search?q={query}"

# Characters encodeURIComponent leaves unescaped besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"

_http_url = TypeAdapter(HttpUrl)


def is_url(text: str) -> bool:
    """Heuristically decide whether text is meant as an address.

    Text qualifies when it parses as an http URL (after adding ``http://``
    if missing) and either contains a dot or already starts with ``http``.
    """
    candidate = text if text.startswith("http") else f"http://{text}"
    try:
        _http_url.validate_python(candidate)
    except ValidationError:
        return False
    return "." in text or text.startswith("http")


def build_search_destination(
    query: str,
    template: str = DEFAULT_SEARCH_URL_TEMPLATE,
) -> str:
    """Build the URL to navigate to for a query.

    Args:
        query: Free-text query typed by the user
        template: Web search URL with a ``{query}`` placeholder

    Returns:
        The address itself (https-prefixed when it has no scheme) for
        URL-like queries, otherwise a web search URL for the query
    """
    query = query.strip()
    if is_url(query):
        return query if query.startswith("http") else f"https://{query}"

    destination = template.replace("{query}", quote(query, safe=_URI_COMPONENT_SAFE))
    logger.debug(f"Query '{query}' is not a URL, using web search")
    return destination
