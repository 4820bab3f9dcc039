"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Todo, Deadline, Event)
- task_list.py: ordered, 1-indexed in-memory collection
- task_store.py: flat-file JSON storage (load_all / save_all)
"""
