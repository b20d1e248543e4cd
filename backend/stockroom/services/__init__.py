# Services package init
"""
Stockroom Backend — Services Package
======================================

What:  Query execution and row shaping, independent of HTTP.

Service Inventory:
    - inventory_service.py: InventoryService (list all rows, get one row by id)

Services never build responses; routes pass their results to a renderer.
"""
