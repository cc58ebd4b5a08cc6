# marketing_site/api/v1/editing.py
from flask import flash, g, jsonify, redirect, request
from werkzeug.exceptions import HTTPException

from marketing_site.application.editing.delete_section import delete_section
from marketing_site.application.editing.move_section import move_section
from marketing_site.editing.patches import DOWN, UP
from marketing_site.exceptions import SiteError
from marketing_site.utils.decorators import editor_required
from marketing_site.views.urls import safe_next
from . import v1_bp

SECTION_URL = "/editing/documents/<document_id>/sections/<key>"


def _respond(action):
    """
    Run an editing action and answer in the caller's format.

    HUD form posts carry a ``next`` field and get a redirect with a flashed
    outcome; API callers get JSON, with errors left to the error handlers.
    """
    next_url = request.form.get("next")
    if next_url is None:
        return jsonify(action()), 200

    try:
        result = action()
    except SiteError as exc:
        flash(exc.message, "error")
    except HTTPException as exc:
        flash(exc.description, "error")
    else:
        flash("Section updated" if result["changed"] else "Nothing to move", "info")
    return redirect(safe_next(next_url))


def _confirmed():
    if request.form.get("confirm") == "yes":
        return True
    data = request.get_json(silent=True) or {}
    return data.get("confirm") is True


@v1_bp.route(f"{SECTION_URL}/delete", methods=["POST"])
@editor_required
def delete_section_route(document_id, key):
    return _respond(lambda: delete_section(
        document_id=document_id,
        key=key,
        confirmed=_confirmed(),
        actor_id=g.editor_id,
    ))


@v1_bp.route(f"{SECTION_URL}/move-up", methods=["POST"])
@editor_required
def move_section_up(document_id, key):
    return _respond(lambda: move_section(
        document_id=document_id,
        key=key,
        direction=UP,
        actor_id=g.editor_id,
    ))


@v1_bp.route(f"{SECTION_URL}/move-down", methods=["POST"])
@editor_required
def move_section_down(document_id, key):
    return _respond(lambda: move_section(
        document_id=document_id,
        key=key,
        direction=DOWN,
        actor_id=g.editor_id,
    ))
