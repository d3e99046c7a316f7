"""Infrastructure layer — in-memory collection store, history log, workspace.

The store and log never validate names; the service layer validates
before it mutates. Nothing here imports from services, commands, or output.
"""
