"""
course_recommender.reporting — CLI formatting and file export.

It does NOT compute anything; all inputs are finished engine results.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — JSON/CSV file export helpers.
"""
