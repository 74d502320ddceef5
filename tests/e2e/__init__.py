"""End-to-end tests.

Purpose
- Drive the installed command-line interface the way a user would and assert
  only on what the user sees (exit codes, stdout, stderr, log files).
"""
