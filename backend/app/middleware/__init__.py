# Middleware package init
"""
Records API - Middleware Package
==================================

Middleware Chain:
    Request → [Access Log / Request ID] → [CORS] → Route Handler
"""
