"""
db/ - Data Layer
================
Holds the fixture data set used to seed and reset the in-memory store.
This layer is the lowest in the architecture and depends only on models.
"""
