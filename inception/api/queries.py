"""Query-string parsing shared by the paged listing endpoints."""

from fastapi import Query

from inception.models.common import NoteSortBy, SortDirection
from inception.models.note import NoteQuery


def note_query(
    filter: str | None = Query(default=None),
    sort_by: NoteSortBy = Query(default=NoteSortBy.CREATED, alias="sortBy"),
    sort_direction: SortDirection = Query(default=SortDirection.DESCENDING, alias="sortDirection"),
    page_index: int | None = Query(default=None, alias="pageIndex"),
    page_size: int | None = Query(default=None, alias="pageSize"),
) -> NoteQuery:
    return NoteQuery(
        filter=filter, sort_by=sort_by, sort_direction=sort_direction,
        page_index=page_index, page_size=page_size,
    )
