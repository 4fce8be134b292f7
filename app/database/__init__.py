from app.database.handler import Database

from app.config import DATABASE_URL, DATABASE_USER, DATABASE_PASS, DATABASE_HOST, DATABASE_NAME

# Database conn credentials
db_url = DATABASE_URL or Database.build_url(DATABASE_USER, DATABASE_PASS, DATABASE_HOST, DATABASE_NAME)

# Init database
Base, engine, SessionLocal, db_handler = Database.init_db(db_url)
