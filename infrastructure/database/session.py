"""
Configuration de la session de base de données SQLAlchemy
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def create_db_engine(database_url: str) -> Engine:
    """Crée le moteur de base de données à partir de l'URL configurée"""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # Base en mémoire : une seule connexion partagée
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, **options)
    
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Crée la session factory liée au moteur"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
