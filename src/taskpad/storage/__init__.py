"""
Key-value storage backends for the persisted task list.

- json_file.py: single JSON document on disk
- sqlite_kv.py: SQLite `kv` table
"""
