"""
taskapp: a small task tracker with an audit log of status changes.

Components:
- tasks/: data structures, SQLite stores and the TaskService
- core/: ports (Protocols), errors and application state
- cli/: bootstrap, slash commands and the entry point
- connectors/: console REPL
"""
