"""Employee Portal package.

Organized by feature modules (time_entries, tasks, payroll, clients, ...)
with a thin Flask controller layer over service/repository layers.
"""
