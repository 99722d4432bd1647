"""Front-desk check-in system package.

Organized by feature modules (visitors, employees, kiosk, passes, ...)
with a thin Flask controller layer over service/repository layers.
"""
