from marketing_site.cms.images import image_url
from marketing_site.cms.portable_text import portable_text

FALLBACK_LANGUAGES = ("it", "en", "es")


def text_value(value):
    """Plain text from a string or a per-language object."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        for language in FALLBACK_LANGUAGES:
            if value.get(language):
                return str(value[language])
    return ""


def register_filters(app):
    app.jinja_env.filters["text"] = text_value
    app.jinja_env.filters["image_url"] = image_url
    app.jinja_env.filters["portable_text"] = portable_text
