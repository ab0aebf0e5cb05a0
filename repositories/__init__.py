"""
repositories/ - Data Access Layer
==================================
Each repository owns the storage for one domain entity and returns
domain model objects.
"""
