"""
Generic, table-driven queries shared by the feature services.

The table argument is always a `Table` member, never a raw string; the SQL
comes from the precomputed `CATALOG`.
"""

from __future__ import annotations

import asyncio
from typing import Any

from . import db
from .envelope import Result, error_response, prepare_result, success_response
from .errors import NotFound, QueryError
from .sanitize import clean_limit, clean_offset, clean_search
from .tables import CATALOG, Relation, Table


def query_error(message: str, result: db.QueryResult) -> QueryError:
    """
    Constraint violations are the caller's fault (400); anything else is ours.
    """
    status_code = 400 if result.is_integrity_violation else 500
    return QueryError(message, details=str(result.error), status_code=status_code)


async def get_all(
    table: Table,
    *,
    offset: Any,
    limit: Any,
    base_url: str,
    default_limit: int = 10,
    max_limit: int = 100,
) -> Result:
    clean_off = clean_offset(offset)
    clean_lim = clean_limit(limit, default=default_limit, maximum=max_limit)

    result = await db.query(CATALOG[table].select_page, clean_off, clean_lim)
    if not result.ok:
        return error_response(query_error(f"Error getting 'all' from table {table.value}", result))

    return success_response(
        prepare_result(
            result.rows,
            path=table.value,
            offset=clean_off,
            limit=clean_lim,
            base_url=base_url,
        )
    )


async def get_all_search(
    table: Table,
    *,
    search: Any,
    offset: Any,
    limit: Any,
    base_url: str,
    default_limit: int = 10,
    max_limit: int = 100,
) -> Result:
    sql = CATALOG[table].search_page
    if sql is None:
        raise ValueError(f"{table.value} is not searchable.")

    clean_off = clean_offset(offset)
    clean_lim = clean_limit(limit, default=default_limit, maximum=max_limit)
    term = clean_search(search)

    result = await db.query(sql, term, clean_off, clean_lim)
    if not result.ok:
        return error_response(query_error(f"Error searching in table {table.value}", result))

    return success_response(
        prepare_result(
            result.rows,
            path=table.value,
            offset=clean_off,
            limit=clean_lim,
            base_url=base_url,
            search=term,
        )
    )


async def get_record_by_id(table: Table, record_id: int) -> Result:
    result = await db.query(CATALOG[table].select_by_id, record_id)
    if not result.ok:
        return error_response(query_error(f"Error getting record from {table.value}", result))

    if result.first is None:
        return error_response(NotFound("Record not found"))

    return success_response(result.first)


async def delete_record_by_id(table: Table, record_id: int) -> Result:
    result = await db.query(CATALOG[table].delete_by_id, record_id)
    if not result.ok:
        return error_response(query_error(f"Error deleting record from table {table.value}", result))

    if result.first is None:
        return error_response(NotFound("Record not found"))

    return success_response(result.first)


async def get_children(relation: Relation, parent_id: int) -> Result:
    """
    Fetch the parent row and its children concurrently.

    A missing parent is a 404; an empty child list is a normal result.
    """
    parent, children = await asyncio.gather(
        db.query(CATALOG[relation.parent].select_by_id, parent_id),
        db.query(relation.select_children, parent_id),
    )

    if not parent.ok:
        return error_response(query_error(f"Error finding record in {relation.parent.value}", parent))

    if parent.first is None:
        return error_response(NotFound(f"Record not found in {relation.parent.value}"))

    if not children.ok:
        return error_response(query_error(f"Error finding records in {relation.child.value}", children))

    return success_response(children.rows)
