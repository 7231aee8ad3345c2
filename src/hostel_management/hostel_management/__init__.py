"""Hostel Management package.

Organized by feature modules (students, rooms, food, ...) with a thin Flask
controller layer over service and repository layers. Every record lives in a
single key-value table reached through ``database.store``.
"""
