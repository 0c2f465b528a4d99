"""Test fixtures for the query and relationship layers.

Two doubles for the Supabase client:

- ``mock_supabase``: a MagicMock whose query builder returns itself from
  every chained call, so tests can assert the exact builder calls made.
- ``fake_supabase``: a small in-memory implementation of the table API
  (select/insert/update/upsert/delete with filters, order and single) that
  enforces unique constraints and raises ``postgrest`` ``APIError`` the way
  the hosted backend does.
"""

import copy
import re
import threading
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError


BUILDER_METHODS = (
    "select", "insert", "update", "upsert", "delete",
    "eq", "neq", "gt", "gte", "lt", "lte", "like", "ilike", "in_",
    "order", "limit", "single",
)

UNIQUE_CONSTRAINTS = {
    "clients": [("name",)],
    "profiles": [("email",), ("username",)],
    "groups": [("client_id", "name")],
    "group_members": [("group_id", "profile_id")],
    "benchmarks": [("dimension_id", "industry_id")],
}

TABLE_DEFAULTS = {
    "group_members": {"role": "member", "position": None},
    "profiles": {"client_id": None, "industry_id": None, "completed_profile": False},
    "groups": {"description": None, "target_id": None},
}

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


# =============================================================================
# MagicMock builder
# =============================================================================


def make_mock_supabase(data=None):
    builder = MagicMock(name="query_builder")
    for name in BUILDER_METHODS:
        getattr(builder, name).return_value = builder
    builder.execute.return_value = MagicMock(data=data)
    supabase = MagicMock(name="supabase")
    supabase.table.return_value = builder
    return supabase, builder


@pytest.fixture
def mock_supabase():
    """Factory: mock_supabase(data) -> (client, builder)"""
    return make_mock_supabase


# =============================================================================
# In-memory fake
# =============================================================================


def _coerce(value, like):
    if isinstance(like, bool) or like is None:
        return value
    if isinstance(like, (int, float)) and isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _like_to_regex(pattern: str) -> str:
    return "^" + ".*".join(re.escape(part) for part in pattern.split("%")) + "$"


class FakeResponse:
    def __init__(self, data):
        self.data = data
        self.count = None


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.action = "select"
        self.payload = None
        self.on_conflict = None
        self.predicates = []
        self.order_by = None
        self.limit_to = None
        self.single_row = False

    # actions
    def select(self, columns="*"):
        self.action = "select"
        return self

    def insert(self, payload):
        self.action, self.payload = "insert", payload
        return self

    def update(self, payload):
        self.action, self.payload = "update", payload
        return self

    def upsert(self, payload, on_conflict=""):
        self.action, self.payload, self.on_conflict = "upsert", payload, on_conflict
        return self

    def delete(self):
        self.action = "delete"
        return self

    # filters
    def _where(self, column, test):
        self.predicates.append(lambda row: test(row.get(column)))
        return self

    def eq(self, column, value):
        return self._where(column, lambda v: v == _coerce(value, v))

    def neq(self, column, value):
        return self._where(column, lambda v: v != _coerce(value, v))

    def gt(self, column, value):
        return self._where(column, lambda v: v is not None and v > _coerce(value, v))

    def gte(self, column, value):
        return self._where(column, lambda v: v is not None and v >= _coerce(value, v))

    def lt(self, column, value):
        return self._where(column, lambda v: v is not None and v < _coerce(value, v))

    def lte(self, column, value):
        return self._where(column, lambda v: v is not None and v <= _coerce(value, v))

    def like(self, column, pattern):
        regex = _like_to_regex(pattern)
        return self._where(column, lambda v: v is not None and re.match(regex, str(v)) is not None)

    def ilike(self, column, pattern):
        regex = _like_to_regex(pattern)
        return self._where(column, lambda v: v is not None and re.match(regex, str(v), re.I) is not None)

    def in_(self, column, values):
        return self._where(column, lambda v: v in values)

    # modifiers
    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, n):
        self.limit_to = n
        return self

    def single(self):
        self.single_row = True
        return self

    def _matching(self):
        return [row for row in self.db.rows(self.table) if all(p(row) for p in self.predicates)]

    def execute(self):
        with self.db.lock:
            self.db.calls.append((self.table, self.action))
            data = copy.deepcopy(getattr(self, f"_execute_{self.action}")())
        if self.single_row:
            if len(data) != 1:
                raise APIError({
                    "message": "JSON object requested, multiple (or no) rows returned",
                    "code": "PGRST116",
                    "hint": None,
                    "details": f"The result contains {len(data)} rows",
                })
            return FakeResponse(data[0])
        return FakeResponse(data)

    def _execute_select(self):
        rows = self._matching()
        if self.order_by:
            column, desc = self.order_by
            rows = sorted(rows, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        if self.limit_to is not None:
            rows = rows[:self.limit_to]
        return rows

    def _execute_insert(self):
        payloads = self.payload if isinstance(self.payload, list) else [self.payload]
        return [self.db.insert_row(self.table, p) for p in payloads]

    def _execute_update(self):
        updated = []
        for row in self._matching():
            self.db.check_unique(self.table, {**row, **self.payload}, ignore=row)
            row.update(self.payload)
            updated.append(row)
        return updated

    def _execute_upsert(self):
        keys = [k.strip() for k in self.on_conflict.split(",") if k.strip()]
        existing = [
            row for row in self.db.rows(self.table)
            if keys and all(row.get(k) == self.payload.get(k) for k in keys)
        ]
        if existing:
            existing[0].update(self.payload)
            return [existing[0]]
        return [self.db.insert_row(self.table, self.payload)]

    def _execute_delete(self):
        doomed = self._matching()
        self.db.tables[self.table] = [r for r in self.db.rows(self.table) if r not in doomed]
        return doomed


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self._clock = 0
        self.lock = threading.RLock()

    def rows(self, table):
        return self.tables.setdefault(table, [])

    def table(self, name):
        return FakeQuery(self, name)

    def now(self):
        self._clock += 1
        return (BASE_TIME + timedelta(seconds=self._clock)).isoformat()

    def check_unique(self, table, candidate, ignore=None):
        for columns in UNIQUE_CONSTRAINTS.get(table, []):
            for row in self.rows(table):
                if row is ignore:
                    continue
                if all(row.get(c) == candidate.get(c) for c in columns):
                    raise APIError({
                        "message": f'duplicate key value violates unique constraint "{table}_{"_".join(columns)}_key"',
                        "code": "23505",
                        "hint": None,
                        "details": None,
                    })

    def insert_row(self, table, payload):
        stamp = self.now()
        row = {
            "id": str(uuid.uuid4()),
            **TABLE_DEFAULTS.get(table, {}),
            "created_at": stamp,
            "updated_at": stamp,
            **payload,
        }
        self.check_unique(table, row)
        self.rows(table).append(row)
        return row

    def seed(self, table, **fields):
        return copy.deepcopy(self.insert_row(table, fields))


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def client_row(fake_supabase):
    return fake_supabase.seed("clients", name="Acme")


@pytest.fixture
def industry_row(fake_supabase):
    return fake_supabase.seed("industries", name="Technology")


@pytest.fixture
def user_row(fake_supabase):
    return fake_supabase.seed("profiles", username="jdoe", name="Jane Doe", email="jane@acme.test")


@pytest.fixture
def group_row(fake_supabase, client_row):
    return fake_supabase.seed("groups", client_id=client_row["id"], name="Leadership Team")
