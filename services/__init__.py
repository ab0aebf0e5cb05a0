"""
services/ - Business Logic Layer
================================
Services hold the rules between handlers and repositories.
"""
