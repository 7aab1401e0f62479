from typing import Any, Dict, List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from backend.app.dependencies import get_db
from backend.app.main import app


class FakeResult:
    def __init__(self, rows: Sequence[Sequence[Any]] = (), rowcount: int = -1):
        self._rows = [tuple(r) for r in rows]
        self.rowcount = rowcount

    def all(self) -> List[tuple]:
        return list(self._rows)

    def first(self) -> Optional[tuple]:
        return self._rows[0] if self._rows else None

    def scalar(self) -> Any:
        row = self.first()
        return row[0] if row else None


class FakeConnection:
    def __init__(self, engine: "FakeEngine", transactional: bool):
        self.engine = engine
        self.transactional = transactional
        self.closed = False

    def execute(self, statement, parameters: Optional[Dict[str, Any]] = None) -> FakeResult:
        sql = str(statement)
        self.engine.executed.append((sql, dict(parameters or {})))
        if self.engine.error is not None:
            raise self.engine.error
        for prefix, result in self.engine.responses.items():
            if sql.startswith(prefix):
                return result
        return FakeResult()

    def __enter__(self) -> "FakeConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.closed = True
        if self.transactional:
            self.engine.committed = exc_type is None
        return False


class FakeEngine:
    """Stands in for a SQLAlchemy Engine: canned results keyed by statement prefix."""

    def __init__(self):
        self.responses: Dict[str, FakeResult] = {}
        self.executed: List[tuple] = []
        self.connections: List[FakeConnection] = []
        self.error: Optional[Exception] = None
        self.committed: Optional[bool] = None

    def respond(self, prefix: str, rows: Sequence[Sequence[Any]] = (), rowcount: int = -1) -> None:
        self.responses[prefix] = FakeResult(rows, rowcount)

    def _open(self, transactional: bool) -> FakeConnection:
        conn = FakeConnection(self, transactional)
        self.connections.append(conn)
        return conn

    def connect(self) -> FakeConnection:
        return self._open(transactional=False)

    def begin(self) -> FakeConnection:
        return self._open(transactional=True)


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def client(fake_engine):
    app.dependency_overrides[get_db] = lambda: fake_engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
