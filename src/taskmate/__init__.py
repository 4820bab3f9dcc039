"""
taskmate: a chat-style todo list.

Components:
- tasks/: task model, in-memory task list, JSON file store
- core/: command values, parser, executor, chat entry point
- connectors/: console REPL
- cli/: bootstrap + `taskmate` entrypoint
"""
