# repository/namespaces.py
from typing import Final

# Keys are "<namespace><identifier>" with no separator, e.g. "bookmark_gh".
BOOKMARKS: Final[str] = "bookmark_"
HISTORY: Final[str] = "history_"

# Width of the largest int64 in decimal; history keys are padded to it.
TIMESTAMP_WIDTH: Final[int] = 19
