"""
Folder/task subsystem.

Components:
- folder_models.py: data structures (Folder, Task, FlattenedTask, Document)
- codec.py: typed JSON decode/encode of the document
- document_store.py: whole-document JSON file store (seeding, change channel)
- folder_repo.py / task_repo.py: CRUD as whole-document rewrites
- projector.py: flattened "all tasks" projection
"""
