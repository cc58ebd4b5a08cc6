from flask import Blueprint

site_bp = Blueprint("site", __name__)

# Import route modules so they register with site_bp
from . import cookies
from . import pages
from . import products
from . import sitemap
