"""
Runner core.

Components:
- ports.py: Task protocol, ParseResult, ArgumentParser
- errors.py: RunnerError, InvalidInput, TaskNotFound
- parsing.py: default {"task": ..., "args": ...} parser
- runner.py: Runner (registry + dispatch)
"""
