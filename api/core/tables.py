"""
Closed catalog of the tables the generic queries may touch.

SQL identifiers only ever come from this module. Statement templates are
built once at import time; request data is bound through $n placeholders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Table(str, Enum):
    USERS = "users"
    TOPICS = "topics"
    ARTICLES = "articles"
    COMMENTS = "comments"
    ARTICLE_LIKES = "article_likes"
    COMMENT_LIKES = "comment_likes"


# Never select `password` through the generic queries.
USER_COLUMNS = "id, username, name, admin, pending"

# Row ids are `serial` (int4) columns.
MAX_ID = 2**31 - 1

# Tables whose rows can be loaded as the subject record of a request.
RECORD_TABLES = frozenset({Table.USERS, Table.TOPICS, Table.ARTICLES, Table.COMMENTS})


@dataclass(frozen=True)
class Statements:
    select_page: str
    select_by_id: str
    delete_by_id: str
    search_page: str | None = None


def _statements(
    table: Table,
    *,
    columns: str = "*",
    search: tuple[str, str] | None = None,
) -> Statements:
    name = table.value
    search_page = None
    if search is not None:
        col1, col2 = search
        search_page = (
            f"SELECT {columns} FROM {name} "
            f"WHERE to_tsvector({col1} || ' ' || {col2}) @@ plainto_tsquery($1) "
            "ORDER BY id OFFSET $2 LIMIT $3"
        )
    return Statements(
        select_page=f"SELECT {columns} FROM {name} ORDER BY id OFFSET $1 LIMIT $2",
        select_by_id=f"SELECT {columns} FROM {name} WHERE id = $1 LIMIT 1",
        delete_by_id=f"DELETE FROM {name} WHERE id = $1 RETURNING {columns}",
        search_page=search_page,
    )


CATALOG: dict[Table, Statements] = {
    Table.USERS: _statements(Table.USERS, columns=USER_COLUMNS, search=("username", "name")),
    Table.TOPICS: _statements(Table.TOPICS),
    Table.ARTICLES: _statements(Table.ARTICLES, search=("title", "article")),
    Table.COMMENTS: _statements(Table.COMMENTS),
}


@dataclass(frozen=True)
class Relation:
    """A parent table and the child rows pointing at it through `column`."""

    parent: Table
    child: Table
    column: str

    @property
    def select_children(self) -> str:
        return f"SELECT * FROM {self.child.value} WHERE {self.column} = $1 ORDER BY id"


ARTICLE_COMMENTS = Relation(Table.ARTICLES, Table.COMMENTS, "articleid")
ARTICLE_LIKES = Relation(Table.ARTICLES, Table.ARTICLE_LIKES, "articleid")
COMMENT_LIKES = Relation(Table.COMMENTS, Table.COMMENT_LIKES, "commentid")
USER_ARTICLES = Relation(Table.USERS, Table.ARTICLES, "userid")
USER_COMMENTS = Relation(Table.USERS, Table.COMMENTS, "userid")
