"""
Fixtures compartidas.

`FakeStore` implementa la misma interfaz que `padel_crm.store.StoreClient`
pero guarda las tablas en memoria, así los tests recorren la API completa
sin hablar con Supabase.
"""

from collections import defaultdict

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_store
from api.main import app
from padel_crm.errors import StoreError

# Columna de cada tabla que apunta a la relación embebida
FOREIGN_KEYS = {"alumnos": "alumno_id", "clases": "clase_id"}


def _matches(row: dict, filters) -> bool:
    return all(str(row.get(column)) == str(value) for column, value in filters)


def _project(row: dict, columns) -> dict:
    if tuple(columns) == ("*",):
        return dict(row)
    return {column: row.get(column) for column in columns}


class FakeStore:
    configured = True

    def __init__(self):
        self.tables = defaultdict(list)
        self._next_id = defaultdict(int)
        self.fail_with = None

    def seed(self, table: str, **row) -> dict:
        self._next_id[table] += 1
        row.setdefault("id", self._next_id[table])
        self.tables[table].append(row)
        return row

    def _check(self):
        if self.fail_with:
            raise StoreError(self.fail_with)

    async def select(self, query) -> list[dict]:
        self._check()
        rows = [row for row in self.tables[query.table] if _matches(row, query.filters)]
        if query.order_by:
            rows = sorted(rows, key=lambda row: str(row.get(query.order_by)), reverse=query.descending)
        result = []
        for row in rows:
            projected = _project(row, query.columns)
            for relation in query.relations:
                foreign_key = FOREIGN_KEYS[relation.table]
                target = next(
                    (t for t in self.tables[relation.table] if str(t["id"]) == str(row.get(foreign_key))),
                    None,
                )
                projected[relation.table] = _project(target, relation.columns) if target else None
            result.append(projected)
        return result

    async def insert(self, table: str, rows) -> list[dict]:
        self._check()
        rows = rows if isinstance(rows, list) else [rows]
        return [dict(self.seed(table, **dict(row))) for row in rows]

    async def update(self, table: str, values: dict, filters) -> list[dict]:
        self._check()
        updated = []
        for row in self.tables[table]:
            if _matches(row, filters):
                row.update(values)
                updated.append(dict(row))
        return updated

    async def delete(self, table: str, filters) -> list[dict]:
        self._check()
        removed = [row for row in self.tables[table] if _matches(row, filters)]
        self.tables[table] = [row for row in self.tables[table] if not _matches(row, filters)]
        return removed


@pytest.fixture
def store():
    """Store en memoria, vacío."""
    return FakeStore()


@pytest.fixture
def client(store: FakeStore):
    """Cliente HTTP contra la app con el store reemplazado."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
