"""
Adapter implementations for Flight Path.

Adapters implement the port interfaces (algorithms) and the file
boundary (itinerary loaders).
"""
