"""Query-string builder for listing content items.

Squidex accepts OData-style parameters on the content collection
endpoint. ``ContentQuery`` renders them in a fixed order:
``$skip``, ``$top``, ``$orderby`` and then either ``$search`` or
``$filter``. A full-text search takes precedence; when both are given
the filter is dropped, not combined. Values are percent-encoded so
that characters such as ``#``, ``&`` and ``+`` reach the server intact.

Examples:
    >>> ContentQuery(skip=10, top=20).to_query_string()
    '?$skip=10&$top=20'
    >>> ContentQuery(search="hello", filter="data/title/iv eq 'x'").to_query_string()
    '?$search=hello'
"""

from urllib.parse import quote

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidArgumentError


# Kept readable in OData expressions; everything else is escaped.
_SAFE_CHARACTERS = "/'()$,:"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class ContentQuery(BaseModel):
    """Paging, ordering and filtering options for a content listing."""

    skip: int | None = Field(None, ge=0)
    top: int | None = Field(None, ge=0)
    order_by: str | None = None
    search: str | None = None
    filter: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def build(
        cls,
        skip: int | None = None,
        top: int | None = None,
        filter: str | None = None,
        order_by: str | None = None,
        search: str | None = None,
    ) -> "ContentQuery":
        """Create a query, reporting invalid values as ``InvalidArgumentError``."""
        try:
            return cls(skip=skip, top=top, filter=filter, order_by=order_by, search=search)
        except PydanticValidationError as e:
            raise InvalidArgumentError(f"Invalid content query: {e}") from e

    def to_params(self) -> list[tuple[str, str]]:
        """Return the query parameters as ordered, unencoded ``(name, value)`` pairs."""
        params: list[tuple[str, str]] = []

        if self.skip is not None:
            params.append(("$skip", str(self.skip)))

        if self.top is not None:
            params.append(("$top", str(self.top)))

        if not _is_blank(self.order_by):
            params.append(("$orderby", self.order_by))  # type: ignore[arg-type]

        if not _is_blank(self.search):
            params.append(("$search", self.search))  # type: ignore[arg-type]
        elif not _is_blank(self.filter):
            params.append(("$filter", self.filter))  # type: ignore[arg-type]

        return params

    def to_query_string(self) -> str:
        """Render the query with percent-encoded values and the leading ``?``.

        Returns:
            ``"?name=value&..."`` or an empty string when nothing is set
        """
        query = "&".join(
            f"{name}={quote(value, safe=_SAFE_CHARACTERS)}" for name, value in self.to_params()
        )
        return f"?{query}" if query else ""
