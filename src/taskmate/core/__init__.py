"""
Core: text in, reply out.

Components:
- commands.py: closed set of command values
- parser.py: line -> command
- executor.py: command + task list -> reply (+ persistence)
- chat.py: get_response() entry point used by connectors
"""
