# database.py
import logging
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
from paths import DATA_DIR, data_file

logger = logging.getLogger(__name__)

# Load environment variables from .env
load_dotenv()

# Make sure the Data directory exists
DATA_DIR.mkdir(exist_ok=True)

# Database URL from .env, defaulting to a SQLite file under Data/
database_url = os.getenv('DATABASE_URL', f"sqlite:///{data_file('customers.db')}")

# check_same_thread is only understood by SQLite
connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

# Create the database engine
engine = create_engine(database_url, connect_args=connect_args)

# Create the sessionmaker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db():
    from Models import Base
    logger.info("Environment: %s", os.getenv('ENVIRONMENT', 'development'))
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized at: %s", database_url)

# FastAPI dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
