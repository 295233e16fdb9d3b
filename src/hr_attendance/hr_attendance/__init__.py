"""HR Attendance package.

Organized by feature modules (employees, attendance) with a thin Flask
controller layer over service/repository layers.
"""
