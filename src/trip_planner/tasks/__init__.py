"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskCategory)
- task_store.py: JSON blob storage on top of the prefs file + the schema-aware codec
- task_ids.py: id allocation over the persisted collection
- task_view.py: full/filtered list pair backing the list screen
- task_forms.py: parsing and validation of user-entered fields
- task_api.py: create / edit / delete / search flows used by the commands
"""
