"""
handlers/start_handler.py
--------------------------
Handles GET / with a static welcome page listing the available routes.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["root"])

WELCOME_HTML = """
<h1>Welcome to the Incident Records API</h1>
<p>Available routes:</p>
<ul>
  <li>POST /alert &middot; GET /alerts</li>
  <li>POST /personal-data &middot; GET /personal-data</li>
  <li>POST /vehicular &middot; GET /vehicular</li>
  <li>POST /camera &middot; GET /cameras</li>
</ul>
"""


@router.get("/", response_class=HTMLResponse)
def welcome() -> str:
    """Handle GET / - show the welcome page."""
    return WELCOME_HTML
