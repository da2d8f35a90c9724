# Middleware package init
"""
Membership Backend — Middleware Package
=========================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    Request ID runs first so the access log line and every log record
    written by the handler carry the same correlation id.
"""
