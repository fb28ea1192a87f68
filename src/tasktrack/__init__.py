"""
tasktrack: a single-user command-line task tracker.

Components:
- tasks/: task model, task list container, persistence codec and file store
- commands/: command variants, results and the line parser
- connectors/console_connector.py: interactive REPL
- cli/: composition root and entrypoint
"""
