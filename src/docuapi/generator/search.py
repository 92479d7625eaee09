"""Search index construction.

The index is a flat list with one entry per (path, method), in document
order. The browser script filters it by case-insensitive substring match on
title or path.
"""

from pydantic import BaseModel

from docuapi.generator.filters import anchor
from docuapi.parser.base import ApiSpec


class SearchEntry(BaseModel):
    path: str
    method: str
    title: str
    description: str = ""
    slug: str


def build_search_index(spec: ApiSpec) -> list[SearchEntry]:
    """Build one SearchEntry per operation, in traversal order."""
    return [
        SearchEntry(
            path=op.path,
            method=op.method,
            title=op.summary or op.description or op.path,
            description=op.description or "",
            slug=anchor(op.path, op.method),
        )
        for op in spec.iter_operations()
    ]


def search_payload(entries: list[SearchEntry]) -> dict:
    """Shape of search.json: ``{"index": [...]}``."""
    return {"index": [entry.model_dump() for entry in entries]}
