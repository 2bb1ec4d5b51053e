"""
Photo API: Middleware Package
=============================

Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Rate Limit] → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Rate Limit first: refuse abusive clients before any processing
    2. Request ID: correlation ID for logs, error bodies and the X-Request-ID header
    3. Logging: one access line per request, tagged with the request ID
"""
