# playarena/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from playarena.core.config import settings


def build_engine(url: str):
    if url.startswith("sqlite"):
        # SQLite: la misma conexión se comparte entre hilos del servidor.
        # En memoria ("sqlite://") usamos una única conexión para que todas
        # las sesiones vean las mismas tablas.
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    # Postgres / MySQL: reciclamos conexiones cada 30 min y comprobamos
    # que siguen vivas antes de cada consulta
    return create_engine(url, pool_recycle=1800, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

class Base(DeclarativeBase):
    pass

def init_db(bind=None, drop: bool = False):
    # IMPORTANTE: importar TODOS los modelos para que SQLAlchemy cree sus tablas
    from playarena.models import match, store, team, user, venue  # noqa: F401

    bind = bind or engine
    if drop:
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
