# marketing_site/api/v1/contact.py
from flask import request, jsonify
from marketing_site.application.contact.submit_contact import submit_contact
from marketing_site.exceptions import ContactValidationError
from . import v1_bp


@v1_bp.route("/contact", methods=["POST"])
def contact():
    data = request.get_json(silent=True)
    if data is None and request.form:
        data = request.form.to_dict()

    try:
        submit_contact(data=data)
    except ContactValidationError as exc:
        return jsonify({"error": exc.message}), 400

    return jsonify({
        "success": True,
        "message": "Message received, we will get back to you soon"
    }), 200
