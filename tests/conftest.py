import os

# Base de datos en memoria antes de importar nada de playarena
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from playarena.core.database import build_engine, get_db, init_db
from playarena.main import app


@pytest.fixture
def db():
    engine = build_engine("sqlite://")
    init_db(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_match(team1_id, team2_id, status="completed", summary=None, match_id="m1", **extra):
    """Partido en formato JSON (camelCase), como lo devuelve el almacén."""
    data = {"team1Id": team1_id, "team2Id": team2_id}
    if summary is not None:
        data["resultSummary"] = summary
    data.update(extra)
    return {"id": match_id, "status": status, "matchData": data}
