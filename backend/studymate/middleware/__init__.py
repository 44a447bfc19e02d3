"""
StudyMate Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and the X-Request-ID response header
    2. Logging: method, path, status and duration, tagged with the request ID
    3. GZip / CORS: Starlette's stock middleware
"""
