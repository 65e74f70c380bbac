"""HR Portal package.

Organized by feature modules (leaves, holidays, employees, settlements, ...)
with a thin Flask controller layer over service/repository layers.
"""
