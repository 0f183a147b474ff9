from typing import Any, Sequence

from sqlalchemy.orm import Query

from frontier_actions.actions.base_action import ModelAction, ModelType
from frontier_actions.actions.pagination import Page, paginate
from frontier_actions.core.config import settings

ALL_COLUMNS = ("*",)


class RetrieveAction(ModelAction[ModelType]):
    """
    Retrieve all records, or a single page of them.

    Pass ``{"per_page": n}`` in options to get a Page instead of a list;
    ``options["page"]`` selects the page (1 by default). Naming columns
    returns rows holding only those columns instead of model instances.
    """

    def handle(
        self,
        columns: Sequence[str] = ALL_COLUMNS,
        options: dict[str, Any] | None = None,
    ) -> list[Any] | Page:
        options = options or {}
        query = self.select(columns)

        per_page = options.get("per_page")
        if per_page:
            return paginate(query, per_page, options.get("page", 1))
        return query.all()

    def select(self, columns: Sequence[str]) -> Query:
        if isinstance(columns, str):
            columns = [columns]
        if not columns or list(columns) == list(ALL_COLUMNS):
            return self.query()
        return self.db.query(*[getattr(self.model, column) for column in columns])


class RetrievePaginateAction(RetrieveAction[ModelType]):
    """Always paginate; the page size falls back to ``settings.per_page``"""

    def handle(
        self,
        columns: Sequence[str] = ALL_COLUMNS,
        options: dict[str, Any] | None = None,
    ) -> Page:
        options = options or {}
        per_page = options.get("per_page") or settings.per_page
        return paginate(self.select(columns), per_page, options.get("page", 1))
