"""Repositories package — the only layer that issues SQL.

How to add a new repository:
  1. Create swagsuite/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
  3. Add any domain-specific query methods as needed
"""
