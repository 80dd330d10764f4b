"""
Restaurant Order System

Composes three patterns around an order-pricing model:
1. Factory: the catalog builds a base order from an order type
2. Decorator: modifiers wrap the order with priced extras
3. Strategy: a payment method settles the final price

The session ties the three together and keeps statistics over completed orders.
"""

__version__ = "1.0.0"
