# Routes package init
"""
Clinic Booking API — API Routes Package
=========================================

Route Inventory:
    - appointments.py:  /api/appointment   (paged list, detail, book, update, cancel)
    - customers.py:     /api/customer
    - employees.py:     /api/employee
    - services.py:      /api/service
    - auth.py:          /api/auth/token, /api/auth/refresh
    - health.py:        /health

Routes stay thin: extract parameters, call a service, wrap the result in the
APIResponse envelope. Failures are raised and formatted by the global
exception handlers in main.py.
"""
