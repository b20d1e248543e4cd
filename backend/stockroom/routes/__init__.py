# Routes package init
"""
Stockroom Backend — Routes Package
====================================

Route Inventory:
    - stuff.py:   GET /                    (landing page)
                  GET /stuff               (list inventory)
                  GET /stuff/item/{id}     (single item detail)
    - health.py:  GET /health              (service health check)

Routes stay thin: call the service, hand the result to the renderer.
"""
