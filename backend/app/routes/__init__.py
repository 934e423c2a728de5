# Routes package init
"""
Records API - API Routes Package
==================================

Route Inventory:
    - records.py: POST /        (insert one record)
                  GET  /        (list all records)
    - health.py:  GET  /health  (service health check)
"""
