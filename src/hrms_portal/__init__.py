"""HRMS Portal package.

Role-scoped HR dashboards (CEO, Manager, HR, Employee, Admin) served by Flask,
organized by feature modules with a thin controller layer over plain services.
"""
