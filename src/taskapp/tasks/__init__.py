"""
Task subsystem.

Components:
- task_models.py: data structures (User, Task, Log, TaskStatus)
- task_store.py: SQLite-backed stores for users, tasks and logs
- task_service.py: lifecycle rules and log bookkeeping
"""
