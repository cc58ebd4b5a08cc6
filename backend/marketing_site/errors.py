from flask import jsonify, request, current_app, render_template
from werkzeug.exceptions import HTTPException
from marketing_site.exceptions import SiteError


def _wants_json():
    return request.path.startswith("/api/")


def register_error_handlers(app):
    @app.errorhandler(SiteError)
    def handle_site_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s: %s", type(error).__name__, error.message)
        response = jsonify({
            "error": type(error).__name__,
            "message": error.message
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if _wants_json():
            response = jsonify({
                "error": error.name,
                "message": error.description
            })
            response.status_code = error.code
            return response
        return render_template("error.html", error=error, settings={}, navigation={}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception("Unhandled error on %s", request.path)
        if _wants_json():
            return jsonify({"error": "Internal server error"}), 500
        return render_template("error.html", error=None, settings={}, navigation={}), 500
