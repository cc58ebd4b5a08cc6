from contextlib import contextmanager

from flask import current_app

from marketing_site.extensions import db


@contextmanager
def transactional(session=None):
    """Commit on success. Roll back, log and re-raise on any error."""
    session = session or db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        current_app.logger.warning("Transaction rolled back", exc_info=True)
        raise
