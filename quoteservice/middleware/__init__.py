# Middleware package init
"""
Quote Service — Middleware Package
===================================

    - request_log.py: RequestLogMiddleware, correlation ID + access log line
"""
