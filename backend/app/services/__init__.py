# Services package init
"""
Clinic Booking API — Services Layer
=====================================

What:  Workflow layer sitting between routes (HTTP) and repositories (persistence).
How:   Services take the request's AsyncSession plus a validated payload,
       apply the existence and uniqueness rules, and return response schemas.

Service Inventory:
    - AppointmentService: booking workflow, slot uniqueness, pagination
    - CustomerService:    customer CRUD, unique email at create
    - EmployeeService:    employee CRUD, unique name at create
    - CatalogService:     treatment CRUD, unique name at create
    - AuthService:        credential check, token issuance, account bootstrap
"""
