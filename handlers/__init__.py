"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler receives an HTTP request,
delegates to RecordService, and returns the JSON response.
No business logic lives here.
"""
