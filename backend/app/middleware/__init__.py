# Middleware package init
"""
Clinic Booking API — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    The request ID is assigned first so the access log line and every log
    record written while handling the request can carry it.
"""
