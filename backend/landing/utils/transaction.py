from contextlib import contextmanager
from flask import current_app
from landing.extensions import db

@contextmanager
def transactional(action="write"):
    """Commit on success, roll back and re-raise on failure."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Transaction failed during %s", action)
        raise
