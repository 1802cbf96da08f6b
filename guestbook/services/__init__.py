"""
Use cases built on top of the repositories (dummy data seeding).
"""
