from records_admin.db.session import SessionLocal
from records_admin.db.store import RecordStore


# every request gets its own store over a fresh session, and the session always closes.
def get_store():
    db = SessionLocal()
    try:
        yield RecordStore(db)
    finally:
        db.close()
