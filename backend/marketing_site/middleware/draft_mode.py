from flask import g, current_app
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from marketing_site.utils.decorators import EDITOR_ROLE


def draft_mode_middleware(app):
    @app.before_request
    def load_draft_mode():
        g.draft_mode = False
        g.editor_id = None
        g.csrf_token = None

        try:
            verify_jwt_in_request(optional=True)
        except (JWTExtendedException, PyJWTError) as exc:
            # Stale or tampered preview cookie, or a write without the CSRF value
            current_app.logger.info("Ignoring editor token: %s", exc)
            return None

        claims = get_jwt() or {}
        if claims.get("role") == EDITOR_ROLE:
            g.draft_mode = True
            g.editor_id = get_jwt_identity()
            # Double-submit value the overlay forms echo back
            g.csrf_token = claims.get("csrf")
        return None
