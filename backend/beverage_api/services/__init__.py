# Services package init
"""
Beverage API: Services Layer
============================

What:  Business logic sitting behind the routes.
How:   Services accept validated schema objects and return response models.
       They know nothing about HTTP.

Service Inventory:
    - BeverageService: Composes beverage orders (drink description + extras)
"""
