# Services package init
"""
Records API - Services Layer
==============================

What:  Statement execution between routes (HTTP) and the database.

Service Inventory:
    - RecordService: insert one record, list all records
"""
