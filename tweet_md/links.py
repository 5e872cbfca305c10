"""Profile and search URLs on the Twitter site."""

from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from tweet_md.config import DEFAULT_CONFIG, RenderConfig

# Characters Node's querystring leaves unescaped on top of RFC 3986 unreserved
_QUERY_SAFE = "!'()*"


def site_url(
    pathname: str,
    query: dict[str, str] | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    """Build an URL on the configured site.

    Args:
        pathname: Path below the site root, with or without leading slash
        query: Query parameters, omitted from the URL when empty
        config: Rendering configuration providing `base_url`

    Returns:
        Absolute URL string
    """
    base = urlsplit(config.base_url)
    path = '/' + pathname.lstrip('/')
    query_string = urlencode(query, quote_via=quote, safe=_QUERY_SAFE) if query else ''
    return urlunsplit((base.scheme, base.netloc, path, query_string, ''))


def profile_url(screen_name: str, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """URL of a user profile page."""
    return site_url(screen_name, config=config)


def search_url(
    query: str,
    source: str | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    """URL of a hashtag search.

    The query is always searched as a hashtag, cashtags included; `source`
    is added as the `src` parameter only when given.
    """
    parameters = {'q': f'#{query}'}
    if source is not None:
        parameters['src'] = source

    return site_url('search', parameters, config=config)
