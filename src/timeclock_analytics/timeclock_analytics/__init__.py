"""Time-clock analytics package.

Organized by feature modules (parsers, punches, attendance, reports, ...)
with a thin Flask controller layer on top of plain service/repository layers.
"""
