"""
models/ - Domain Layer
======================
Dataclasses for cars, the request/result types handlers exchange,
and the error taxonomy.
"""
