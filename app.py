"""
messagely-api/app.py
Point d'entrée principal de l'API de messagerie

Lancement : uvicorn app:create_app --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from api.endpoints import auth_router, messages_router, users_router
from api.errors import register_exception_handlers
from api.middleware import RequestTimeoutMiddleware
from infrastructure.database import create_db_engine, create_session_factory, init_db
from logging_config import setup_logging, setup_colored_logging

logger = logging.getLogger("messagely")


def configure_logging(config: Config) -> logging.Logger:
    """Configure le logging selon la configuration"""
    log_file = config.log_file_path if config.log_file_enabled else None
    if config.log_colored:
        return setup_colored_logging(log_level=config.log_level, log_file=log_file)
    return setup_logging(log_level=config.log_level, log_file=log_file)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Construit l'application à partir d'une configuration immuable"""
    config = config or Config()
    configure_logging(config)
    engine = create_db_engine(config.database_url)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Gestion du cycle de vie de l'application"""
        # --- Startup ---
        logger.info("🚀 Démarrage de Messagely API")
        logger.info(f"📊 Database: {config.database_url.split('@')[-1]}")
        if config.uses_default_secret:
            logger.warning("⚠️ JWT_SECRET_KEY non configuré : clé par défaut utilisée")
        if not config.jwt_expire_minutes:
            logger.info("Les tokens JWT n'expirent pas (JWT_EXPIRE_MINUTES non défini)")
        init_db(engine)
        
        yield
        
        # --- Shutdown ---
        logger.info("🛑 Arrêt de Messagely API")
        engine.dispose()
    
    app = FastAPI(
        title="Messagely API",
        description="API de messagerie directe entre utilisateurs",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    
    # Configuration et session factory accessibles depuis les dépendances
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    
    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=config.request_timeout_seconds)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    
    app.include_router(auth_router)
    app.include_router(messages_router)
    app.include_router(users_router)
    
    @app.get("/", tags=["Root"])
    def root():
        """Page d'accueil de l'API"""
        return {
            "service": "messagely-api",
            "version": "1.0.0",
            "status": "operational",
            "documentation": "/docs"
        }
    
    @app.get("/health", tags=["System"])
    def health_check():
        """Endpoint de santé pour les orchestrateurs (Kubernetes, Docker, etc.)"""
        return {
            "status": "healthy",
            "service": "messagely-api"
        }
    
    return app


if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config
    
    config = Config()
    
    uvicorn.run(
        create_app(config),
        host="0.0.0.0",
        port=8000,
        log_config=get_uvicorn_log_config(log_level=config.log_level)
    )
