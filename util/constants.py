from typing import Final


class InternalURIs:
    INDEX = "/"
    HEALTHZ = "/healthz"
    HELP = "/help"
    LIST = "/list"
    HISTORY = "/history"
    OPENSEARCH = "/opensearch.xml"
    SUGGEST = "/suggest"
    COMMAND = "/{command}"
    COMMAND_ARGS = "/{command}/{args:path}"


class ExternalURIs:
    DEFAULT_URL = "https://www.google.com/search?q=%s&btnK"
    DEFAULT_SUGGEST_URL = (
        "https://suggestqueries.google.com/complete/search?client=firefox&q=%s"
    )


HISTORY_ERROR_HEADER: Final[str] = "X-History-Error"

# Seeded into an empty store on first start.
DEFAULT_BOOKMARKS: Final[dict[str, str]] = {
    "g": "https://www.google.com/search?q=%s&btnK",
    "gh": "https://github.com/search?q=%s&ref=opensearch",
    "go": "https://golang.org/search?q=%s",
    "py": "https://docs.python.org/3/search.html?q=%s",
    "wp": "http://en.wikipedia.org/?search=%s",
    "yt": "https://www.youtube.com/results?search_type=search_videos&search_query=%s",
    "ddg": "https://duckduckgo.com/?q=%s",
}

OPENSEARCH_TEMPLATE: Final[str] = """<?xml version="1.0" encoding="UTF-8"?>
<OpenSearchDescription xmlns="http://a9.com/-/spec/opensearch/1.1/"
                       xmlns:moz="http://www.mozilla.org/2006/browser/search/">
  <ShortName>{title}</ShortName>
  <Description>{title}</Description>
  <InputEncoding>UTF-8</InputEncoding>
  <Url type="text/html" method="get" template="http://{fqdn}/?q={{searchTerms}}"/>
  <Url type="application/x-suggestions+json" template="http://{fqdn}/suggest?q={{searchTerms}}"/>
  <moz:SearchForm>http://{fqdn}/</moz:SearchForm>
</OpenSearchDescription>
"""
