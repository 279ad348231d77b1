# Middleware package init
"""
ApisLabs Catalog API - Middleware Package
==========================================

Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first so every later log line carries it
    2. Logging captures response status and duration on the way out
"""
