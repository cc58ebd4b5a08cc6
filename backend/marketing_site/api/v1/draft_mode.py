# marketing_site/api/v1/draft_mode.py
import hmac

from flask import current_app, jsonify, redirect, request
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies

from marketing_site.utils.decorators import EDITOR_ROLE
from marketing_site.views.urls import safe_next
from . import v1_bp


@v1_bp.route("/draft-mode/enable", methods=["GET"])
def enable_draft_mode():
    secret = current_app.config.get("DRAFT_MODE_SECRET")
    if not secret:
        current_app.logger.error("DRAFT_MODE_SECRET not configured")
        return jsonify({"error": "Draft mode is not configured"}), 500

    provided = request.args.get("secret", "")
    if not hmac.compare_digest(provided.encode(), secret.encode()):
        current_app.logger.warning("Invalid draft mode secret from %s", request.remote_addr)
        return jsonify({"error": "Invalid secret"}), 401

    editor = request.args.get("editor") or "studio"
    token = create_access_token(
        identity=editor,
        additional_claims={"role": EDITOR_ROLE},
    )

    slug = (request.args.get("slug") or "").strip("/")
    target = "/" if slug in ("", "home") else f"/{slug}"

    response = redirect(target)
    set_access_cookies(response, token)
    current_app.logger.info("Draft mode enabled for %s", editor)
    return response


@v1_bp.route("/draft-mode/disable", methods=["GET"])
def disable_draft_mode():
    response = redirect(safe_next(request.args.get("next")))
    unset_jwt_cookies(response)
    return response
