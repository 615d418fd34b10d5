"""
Task subsystem.

Components:
- task_models.py: task variants (ToDo, Deadline, Event) and their rendering
- task_builders.py: build tasks from command bodies
- record_codec.py: flat record encode/decode
- task_store.py: file-backed record store + archive log
- task_manager.py: in-memory list and the operations on it
"""
