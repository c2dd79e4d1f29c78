# model/bookmark.py
from pydantic import BaseModel, Field
from util.functions import fill_template


class Bookmark(BaseModel):
    name: str = Field(min_length=1)
    url_template: str = Field(min_length=1)

    def target(self, query: str) -> str:
        """URL to redirect to for `query`; templates without `%s` ignore it."""
        return fill_template(self.url_template, query)
