"""
handlers/ - Presentation Layer
================================
HTTP-facing handlers. Each handler receives a request description,
delegates to the appropriate Service, and hands a result back to the
dispatcher. No business logic lives here.
"""
