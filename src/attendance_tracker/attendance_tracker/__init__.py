"""Office attendance tracker package.

Organized by feature modules (employees, offices, attendance, wfh, geo)
with a thin Flask controller layer over service/repository layers.
"""
