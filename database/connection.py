import os
import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.engine.url import URL
from dotenv import load_dotenv

from database.sqlite_functions import register_unicode_functions

# Load environment variables
load_dotenv()

logger = logging.getLogger("database.connection")

def get_connection_url():
    """
    Synthesizes the database URL based on environment variables.
    DATABASE_URL wins when set; otherwise the DB_* parts are combined.
    Handles the directory creation for SQLite.
    """
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    engine_type = os.getenv("DB_ENGINE", "sqlite").lower()

    if engine_type == "sqlite":
        db_name = os.getenv("DB_NAME", "modvoyage.db")

        # This file is in /project/database/connection.py
        # SQLite files live in /project/database/instance/
        current_dir = os.path.dirname(os.path.abspath(__file__))
        instance_dir = os.path.join(current_dir, "instance")

        if not os.path.exists(instance_dir):
            try:
                os.makedirs(instance_dir, exist_ok=True)
                logger.info(f"Created SQLite instance directory: {instance_dir}")
            except OSError as e:
                logger.error(f"Could not create database directory: {e}")
                raise

        db_path = os.path.join(instance_dir, db_name)
        return f"sqlite:///{db_path}"

    driver_map = {
        'postgresql': 'postgresql+psycopg2',
        'mysql': 'mysql+pymysql',
    }
    driver = driver_map.get(engine_type, engine_type)

    return URL.create(
        drivername=driver,
        username=os.getenv("DB_USER"),
        password=os.getenv("DB_PASSWORD"),
        host=os.getenv("DB_HOST"),
        port=int(os.getenv("DB_PORT")) if os.getenv("DB_PORT") else None,
        database=os.getenv("DB_NAME")
    )

def create_app_engine(url=None):
    """
    Configures the SQLAlchemy Engine with dialect-specific options.
    """
    url = url or get_connection_url()
    str_url = str(url)
    is_sqlite = str_url.startswith("sqlite")
    is_mysql = "mysql" in str_url
    is_postgres = "postgres" in str_url

    kwargs = {
        'echo': os.getenv("DB_ECHO", "False").lower() == 'true',
    }

    if is_sqlite:
        # Requests run in FastAPI's threadpool
        kwargs['connect_args'] = {'check_same_thread': False, 'timeout': 60}

    elif is_mysql:
        kwargs['pool_recycle'] = 3600
        kwargs['pool_pre_ping'] = True
        kwargs['pool_size'] = int(os.getenv("DB_POOL_SIZE", 5))
        kwargs['max_overflow'] = int(os.getenv("DB_MAX_OVERFLOW", 10))

    elif is_postgres:
        kwargs['pool_pre_ping'] = True
        kwargs['pool_size'] = int(os.getenv("DB_POOL_SIZE", 5))
        kwargs['max_overflow'] = int(os.getenv("DB_MAX_OVERFLOW", 10))

    engine = create_engine(url, **kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=DELETE")
            cursor.close()
            register_unicode_functions(dbapi_connection)

    return engine

# Singleton Engine
engine = create_app_engine()

# Session factory; the SQL catalog store opens one session per operation
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
