"""
Couche infrastructure : implementations concretes du port IStorage.

- memory/ : Stockage en memoire (defaut)
- persistence/ : Stockage SQLite via SQLModel
"""
